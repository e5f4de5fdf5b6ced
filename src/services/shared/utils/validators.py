from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """金額入力を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    float は str 経由で変換し、2 進誤差を持ち込まない。
    bool・NaN・Infinity は金額として受け付けない（ValueError は 400 になる）。
    """
    if isinstance(v, bool):
        raise ValueError("Amount must be a number")
    if isinstance(v, Decimal):
        value = v
    else:
        try:
            value = Decimal(str(v))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {v!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {v!r}")
    return value
