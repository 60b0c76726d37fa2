from decimal import Decimal, InvalidOperation


def to_amount(v: object) -> Decimal:
    """API の金額（数値または数値文字列）を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出す。
    float は str 経由で変換して 2 進誤差を持ち込まない。
    """
    if isinstance(v, Decimal):
        return v
    if v is None or isinstance(v, bool):
        raise ValueError(f"Amount must be a number: {v!r}")
    try:
        return Decimal(str(v).strip())
    except InvalidOperation as e:
        raise ValueError(f"Amount must be a number: {v!r}") from e
