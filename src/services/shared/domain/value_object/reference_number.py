import random
from datetime import datetime, timezone


def generate_reference_number(prefix: str, now: datetime | None = None) -> str:
    """人が読める参照番号を生成する

    形式: <prefix><エポックミリ秒の下 6 桁><乱数 3 桁>（例: BK123456042）
    一意性は保証しないため、識別には集約 ID を使うこと。
    """
    now = now or datetime.now(timezone.utc)
    millis = str(int(now.timestamp() * 1000))
    return f"{prefix}{millis[-6:]}{random.randint(0, 999):03d}"
