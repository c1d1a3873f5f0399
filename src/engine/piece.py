"""
Push Chess の駒の種類と色を定義するモジュール
"""

from dataclasses import dataclass, replace
from enum import Enum, auto

from .errors import ErrorKind, PushChessError


class Color(Enum):
    """駒の色"""
    WHITE = 0
    BLACK = 1


class PieceType(Enum):
    """駒の種類"""
    PAWN = auto()    # ポーン（移動ルール未定義）
    BISHOP = auto()  # ビショップ - 斜め
    KNIGHT = auto()  # ナイト - 入れ替え
    ROOK = auto()    # ルーク - 縦横
    QUEEN = auto()   # クイーン - ビショップ+ルーク
    KING = auto()    # キング - 周囲1マス


# FEN表記の文字（白の大文字）
PIECE_LETTERS = {
    PieceType.PAWN: "P",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

LETTER_TO_PIECE_TYPE = {letter: piece_type for piece_type, letter in PIECE_LETTERS.items()}


@dataclass(frozen=True)
class Piece:
    """
    Push Chess の駒を表す値オブジェクト

    has_moved が True になった駒は二度と自分から動けない
    （押されたり入れ替えられたりするのは構わない）
    """
    piece_type: PieceType
    color: Color
    has_moved: bool = False

    @property
    def letter(self) -> str:
        """FEN表記の1文字（白は大文字、黒は小文字）"""
        letter = PIECE_LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    def __str__(self):
        return self.letter

    def mark_moved(self) -> 'Piece':
        """移動済みにした駒を返す"""
        return replace(self, has_moved=True)

    def to_dict(self) -> dict:
        """駒を辞書形式に変換（API用）"""
        return {
            "type": self.piece_type.name,
            "color": self.color.name,
            "has_moved": self.has_moved,
        }

    @staticmethod
    def from_letter(letter: str) -> 'Piece':
        """FEN表記の1文字から未移動の駒を作成"""
        piece_type = LETTER_TO_PIECE_TYPE.get(letter.upper())
        if piece_type is None:
            raise PushChessError(ErrorKind.INVALID_NOTATION, f"Invalid piece character: {letter!r}")
        color = Color.WHITE if letter.isupper() else Color.BLACK
        return Piece(piece_type, color)
