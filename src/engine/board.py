"""
Push Chess の盤面を管理するモジュール

盤面は不変。駒を動かす操作はすべて新しい Board を返す。
座標は (row, col) で、row 0 = 8段目、col 0 = aファイル。
"""

from typing import Dict, Iterator, List, Optional, Tuple

from .errors import ErrorKind, PushChessError
from .piece import Color, Piece, PieceType

# 盤面サイズ
BOARD_SIZE = 8
FILES = "abcdefgh"

Position = Tuple[int, int]
Cells = Tuple[Tuple[Optional[Piece], ...], ...]


def is_valid_position(position: Position) -> bool:
    """位置が盤面内か確認"""
    row, col = position
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def parse_square(square: str) -> Position:
    """
    代数表記のマス目（例: 'a8'）を座標に変換
    盤外チェックはしない（'i1' や 'a9' は盤外の座標になる）
    """
    if not isinstance(square, str) or len(square) != 2:
        raise PushChessError(ErrorKind.INVALID_NOTATION, f"Invalid square: {square!r}")
    file_char, rank_char = square[0].lower(), square[1]
    if not ("a" <= file_char <= "z") or rank_char not in "0123456789":
        raise PushChessError(ErrorKind.INVALID_NOTATION, f"Invalid square: {square!r}")
    return (BOARD_SIZE - int(rank_char), ord(file_char) - ord("a"))


def square_name(position: Position) -> str:
    """座標を代数表記のマス目に変換"""
    row, col = position
    return f"{FILES[col]}{BOARD_SIZE - row}"


def step_direction(from_pos: Position, to_pos: Position) -> Position:
    """移動方向の単位ベクトル (sign(Δrow), sign(Δcol))"""
    d_row = to_pos[0] - from_pos[0]
    d_col = to_pos[1] - from_pos[1]
    return ((d_row > 0) - (d_row < 0), (d_col > 0) - (d_col < 0))


def all_positions() -> Iterator[Position]:
    """盤上の全座標を行優先（8段目→1段目、a→h）で返す"""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield (row, col)


class Board:
    """Push Chess のゲームボード（不変の値）"""

    __slots__ = ("_cells",)

    def __init__(self, cells=None):
        if cells is None:
            cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        rows = tuple(tuple(row) for row in cells)
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        self._cells: Cells = rows

    @property
    def cells(self) -> Cells:
        return self._cells

    def get_piece(self, position: Position) -> Optional[Piece]:
        """指定位置の駒を取得"""
        if not is_valid_position(position):
            raise ValueError(f"Invalid position: {position}")
        row, col = position
        return self._cells[row][col]

    def is_occupied(self, position: Position) -> bool:
        """指定位置に駒があるか確認"""
        return self.get_piece(position) is not None

    def with_pieces(self, changes: Dict[Position, Optional[Piece]]) -> 'Board':
        """指定したマスだけ差し替えた新しい盤面を返す"""
        for position in changes:
            if not is_valid_position(position):
                raise ValueError(f"Invalid position: {position}")
        return Board([
            [changes.get((row, col), cell) for col, cell in enumerate(cells)]
            for row, cells in enumerate(self._cells)
        ])

    def pieces(self) -> Iterator[Tuple[Position, Piece]]:
        """盤上の駒を行優先で (位置, 駒) の形で返す"""
        for position in all_positions():
            piece = self.get_piece(position)
            if piece is not None:
                yield position, piece

    def find_piece(self, piece_type: PieceType, color: Color) -> Optional[Position]:
        """指定した種類・色の駒を行優先で探し、最初に見つかった位置を返す"""
        for position, piece in self.pieces():
            if piece.piece_type == piece_type and piece.color == color:
                return position
        return None

    # --- 公開操作のショートカット ---

    @staticmethod
    def from_fen(text: str) -> 'Board':
        from .notation import parse_board
        return parse_board(text)

    def to_fen(self) -> str:
        from .notation import serialize_board
        return serialize_board(self)

    def apply_move(self, from_square: str, to_square: str) -> 'Board':
        from .push_chess import apply_move
        return apply_move(self, from_square, to_square)

    def moveable_pieces(self) -> List[str]:
        from .push_chess import moveable_pieces
        return moveable_pieces(self)

    def checkers(self) -> List[str]:
        from .push_chess import checkers
        return checkers(self)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Board({self.to_fen()!r})"

    def __str__(self):
        """盤面の文字列表現を返す"""
        result = []
        for row in range(BOARD_SIZE):
            rank = BOARD_SIZE - row
            cells = [str(cell) if cell is not None else "." for cell in self._cells[row]]
            result.append(f"{rank} " + " ".join(cells))
        result.append("  " + " ".join(FILES))
        return "\n".join(result)

    def to_dict(self) -> dict:
        """盤面を辞書形式に変換（API用）"""
        white_king = self.find_piece(PieceType.KING, Color.WHITE)
        return {
            "board": [
                [cell.to_dict() if cell is not None else None for cell in row]
                for row in self._cells
            ],
            "white_king": square_name(white_king) if white_king is not None else None,
        }
