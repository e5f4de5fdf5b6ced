from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

import boto3
from botocore.exceptions import ClientError

from services.shared.config import get_settings
from services.shared.domain import AggregateRoot
from services.shared.domain.exception import (
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    PersistenceException,
)

T = TypeVar("T", bound=AggregateRoot)
ID = TypeVar("ID")

METADATA = "METADATA"


class DynamoDBRepository(ABC, Generic[T, ID]):
    """DynamoDB シングルテーブル上の Repository 共通実装

    - 1 集約 = 1 アイテム（PK=<ENTITY>#<id>, SK=METADATA）
    - 新規作成は attribute_not_exists(PK)、更新は version 一致を条件に書き込む
    - is_active=False のアイテムは検索結果から除外する
    """

    entity_type: ClassVar[str]

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or get_settings().TABLE_NAME
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    @abstractmethod
    def _key(self, id: ID) -> dict:
        """集約IDからキーを生成する"""
        raise NotImplementedError

    @abstractmethod
    def _to_item(self, aggregate: T) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する（キー以外）"""
        raise NotImplementedError

    @abstractmethod
    def _to_entity(self, item: dict) -> T:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        raise NotImplementedError

    def find_by_id(self, id: ID) -> T | None:
        """IDで検索（無効化済みは None）"""
        return self._get(self._key(id))

    def save(self, aggregate: T) -> None:
        """新規の集約を保存する"""
        self._put(aggregate, is_new=True)

    def update(self, aggregate: T) -> None:
        """既存の集約を version 条件付きで更新する"""
        self._put(aggregate, is_new=False)

    def put_request(self, aggregate: T, is_new: bool) -> dict:
        """条件付き PutItem のリクエストを組み立てる

        UnitOfWork がトランザクション書き込みにも利用する。
        """
        item = {
            **self._key(aggregate.id),
            "entity_type": self.entity_type,
            **self._to_item(aggregate),
            "version": aggregate.version + 1,
        }
        if is_new:
            return {"Item": item, "ConditionExpression": "attribute_not_exists(PK)"}
        return {
            "Item": item,
            "ConditionExpression": "#version = :expected_version",
            "ExpressionAttributeNames": {"#version": "version"},
            "ExpressionAttributeValues": {":expected_version": aggregate.version},
        }

    def _get(self, key: dict, include_inactive: bool = False) -> T | None:
        try:
            response = self.table.get_item(Key=key, ConsistentRead=True)
        except ClientError as e:
            raise PersistenceException(f"Failed to read {self.entity_type}") from e
        item = response.get("Item")
        if not item:
            return None
        if not include_inactive and not item.get("is_active", True):
            return None
        return self._to_entity(item)

    def _put(self, aggregate: T, is_new: bool) -> None:
        try:
            self.table.put_item(**self.put_request(aggregate, is_new))
        except ClientError as e:
            raise translate_conditional_failure(
                e.response["Error"]["Code"], self.entity_type, aggregate, is_new
            ) from e
        aggregate.mark_persisted()


def translate_conditional_failure(
    code: str | None, entity_type: str, aggregate: AggregateRoot, is_new: bool
) -> DomainException:
    """条件付き書き込みの失敗をドメイン例外に変換する"""
    if code in ("ConditionalCheckFailedException", "ConditionalCheckFailed"):
        if is_new:
            return DuplicateResourceException(
                f"{entity_type} already exists: {aggregate.id}"
            )
        return OptimisticLockException(
            f"{entity_type} was modified concurrently: "
            f"expected version {aggregate.version}, id={aggregate.id}"
        )
    if code in ("TransactionConflict", "TransactionConflictException"):
        return OptimisticLockException(
            f"{entity_type} is locked by another transaction: id={aggregate.id}"
        )
    return PersistenceException(f"Failed to write {entity_type}: {code}")


def as_int(value: object) -> int:
    """DynamoDB の数値（Decimal）を int に変換する"""
    return int(value)  # type: ignore[arg-type]
