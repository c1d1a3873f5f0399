"""
Push Chess の手（Move）を表現するモジュール
"""

from enum import Enum, auto

from .board import Position, is_valid_position, parse_square, square_name, step_direction
from .piece import PieceType


class MoveType(Enum):
    """手の解決方法"""
    SWAP = auto()  # 入れ替え（ナイト）
    PUSH = auto()  # 押し出し（ナイト以外）

    @staticmethod
    def for_piece_type(piece_type: PieceType) -> 'MoveType':
        """駒の種類から解決方法を決める"""
        return MoveType.SWAP if piece_type == PieceType.KNIGHT else MoveType.PUSH


class Move:
    """Push Chess の一手を表すクラス"""

    def __init__(self, from_pos: Position, to_pos: Position):
        self.from_pos = from_pos  # 移動元
        self.to_pos = to_pos      # 移動先

    @property
    def direction(self) -> Position:
        """移動方向の単位ベクトル"""
        return step_direction(self.from_pos, self.to_pos)

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return (self.from_pos, self.to_pos) == (other.from_pos, other.to_pos)

    def __hash__(self):
        return hash((self.from_pos, self.to_pos))

    def __str__(self):
        return f"{self._name(self.from_pos)}-{self._name(self.to_pos)}"

    def __repr__(self):
        return f"Move(from={self.from_pos}, to={self.to_pos})"

    @staticmethod
    def _name(position: Position) -> str:
        if is_valid_position(position):
            return square_name(position)
        return str(position)

    def to_dict(self) -> dict:
        """手を辞書形式に変換（API用）"""
        return {
            "from": self._name(self.from_pos),
            "to": self._name(self.to_pos),
        }

    @staticmethod
    def from_squares(from_square: str, to_square: str) -> 'Move':
        """代数表記のマス目2つから手を作成"""
        return Move(parse_square(from_square), parse_square(to_square))
