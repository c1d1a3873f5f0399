"""
エンジンのエラー定義

呼び出し側はメッセージではなく kind で分岐する
"""

from enum import Enum, auto


class ErrorKind(Enum):
    """エラーの種類"""
    INVALID_NOTATION = auto()    # 盤面・マス目の表記が不正
    OUT_OF_BOUNDS = auto()       # 移動先が盤外
    ILLEGAL_MOVE = auto()        # 駒の動きに合わない、または押し出しが盤外に出る
    UNIMPLEMENTED = auto()       # ポーンの動きは未定義
    NO_PIECE_AT_SOURCE = auto()  # 移動元に駒がない


class PushChessError(ValueError):
    """Push Chess エンジンの例外"""

    def __init__(self, kind: ErrorKind, message: str = ""):
        super().__init__(message or kind.name)
        self.kind = kind

    @property
    def message(self) -> str:
        return str(self)

    def __repr__(self):
        return f"PushChessError({self.kind.name}, {str(self)!r})"

    def to_dict(self) -> dict:
        """エラーを辞書形式に変換（API用）"""
        return {
            "kind": self.kind.name,
            "message": self.message,
        }
