"""引数検証と例外定義"""


class KansujiArgumentError(ValueError):
    """変換関数に文字列以外（None など）が渡された"""


def require_text(value, name: str = "text") -> str:
    """
    公開関数の入力を検証する

    None や str 以外の値は処理前に KansujiArgumentError とする。
    空文字列は有効な入力。
    """
    if value is None:
        raise KansujiArgumentError(f"{name} must not be None")
    if not isinstance(value, str):
        raise KansujiArgumentError(
            f"{name} must be str, not {type(value).__name__}"
        )
    return value
