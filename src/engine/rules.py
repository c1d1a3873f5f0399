"""
Push Chess のルール判定を行うモジュール

- 駒ごとの動きの判定（スライド駒は途中の障害物も確認）
- 動かせる駒・王手をかけている駒の検索
"""

from typing import Callable, Dict, List, Optional

from .board import Board, Position, all_positions, is_valid_position, step_direction
from .errors import ErrorKind, PushChessError
from .move import MoveType
from .piece import Color, Piece, PieceType


class Rules:
    """Push Chess のルールを管理するクラス"""

    @staticmethod
    def is_legal_move(board: Board, from_pos: Position, to_pos: Position, piece: Piece) -> bool:
        """
        駒の種類に応じて移動が合法か判定
        移動先に駒があるかどうかは見ない（押し出し・入れ替えで解決する）
        """
        check = LEGALITY_CHECKS[piece.piece_type]
        return check(board, from_pos, to_pos)

    @staticmethod
    def _is_legal_pawn_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
        raise PushChessError(ErrorKind.UNIMPLEMENTED, "Pawn movement is not implemented")

    @staticmethod
    def _is_legal_bishop_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
        return (Rules._is_non_zero_move(from_pos, to_pos)
                and Rules._is_diagonal_move(from_pos, to_pos)
                and Rules._has_no_obstacles(board, from_pos, to_pos))

    @staticmethod
    def _is_legal_rook_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
        return (Rules._is_non_zero_move(from_pos, to_pos)
                and Rules._is_one_dimensional_move(from_pos, to_pos)
                and Rules._has_no_obstacles(board, from_pos, to_pos))

    @staticmethod
    def _is_legal_queen_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
        return (Rules._is_legal_bishop_move(board, from_pos, to_pos)
                or Rules._is_legal_rook_move(board, from_pos, to_pos))

    @staticmethod
    def _is_legal_knight_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
        # ジャンプなので途中チェック不要
        d_row = abs(to_pos[0] - from_pos[0])
        d_col = abs(to_pos[1] - from_pos[1])
        return (d_row, d_col) in ((1, 2), (2, 1))

    @staticmethod
    def _is_legal_king_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
        distance_squared = (to_pos[0] - from_pos[0]) ** 2 + (to_pos[1] - from_pos[1]) ** 2
        return 1 <= distance_squared <= 2

    @staticmethod
    def _is_non_zero_move(from_pos: Position, to_pos: Position) -> bool:
        return from_pos != to_pos

    @staticmethod
    def _is_diagonal_move(from_pos: Position, to_pos: Position) -> bool:
        return abs(to_pos[0] - from_pos[0]) == abs(to_pos[1] - from_pos[1])

    @staticmethod
    def _is_one_dimensional_move(from_pos: Position, to_pos: Position) -> bool:
        return to_pos[0] == from_pos[0] or to_pos[1] == from_pos[1]

    @staticmethod
    def _has_no_obstacles(board: Board, from_pos: Position, to_pos: Position) -> bool:
        """移動元と移動先の間（両端を含まない）がすべて空きマスか確認"""
        step_row, step_col = step_direction(from_pos, to_pos)
        distance = max(abs(to_pos[0] - from_pos[0]), abs(to_pos[1] - from_pos[1]))

        for step in range(1, distance):
            check_pos = (from_pos[0] + step_row * step, from_pos[1] + step_col * step)
            if board.is_occupied(check_pos):
                return False
        return True

    @staticmethod
    def push_chain_fits(board: Board, from_pos: Position, to_pos: Position) -> bool:
        """
        押し出しの連鎖が盤内に収まるか確認
        移動先から同じ方向に駒が続く限りたどり、最初の空きマスが盤内にあればOK
        """
        step_row, step_col = step_direction(from_pos, to_pos)
        row, col = to_pos
        while is_valid_position((row, col)):
            if not board.is_occupied((row, col)):
                return True
            row, col = row + step_row, col + step_col
        return False

    @staticmethod
    def get_legal_destinations(board: Board, from_pos: Position) -> List[Position]:
        """
        指定位置の駒が実際に動ける移動先を行優先で取得
        移動済みかどうかは見ない
        """
        piece = board.get_piece(from_pos)
        if piece is None:
            raise PushChessError(ErrorKind.NO_PIECE_AT_SOURCE, f"No piece at {from_pos}")

        move_type = MoveType.for_piece_type(piece.piece_type)
        destinations = []
        for to_pos in all_positions():
            if not Rules.is_legal_move(board, from_pos, to_pos, piece):
                continue
            if move_type == MoveType.PUSH and not Rules.push_chain_fits(board, from_pos, to_pos):
                continue
            destinations.append(to_pos)
        return destinations

    @staticmethod
    def get_moveable_positions(board: Board) -> List[Position]:
        """まだ動いていない白の駒の位置を行優先で取得"""
        return [
            position for position, piece in board.pieces()
            if piece.color == Color.WHITE and not piece.has_moved
        ]

    @staticmethod
    def find_white_king(board: Board) -> Optional[Position]:
        """白のキングの位置（複数あれば行優先で最初のもの）"""
        return board.find_piece(PieceType.KING, Color.WHITE)

    @staticmethod
    def get_checker_positions(board: Board) -> List[Position]:
        """
        白のキングに利いている黒の駒の位置を行優先で取得
        白のキングがいなければ空リスト
        """
        king_pos = Rules.find_white_king(board)
        if king_pos is None:
            return []

        return [
            position for position, piece in board.pieces()
            if piece.color == Color.BLACK and Rules.is_legal_move(board, position, king_pos, piece)
        ]

    @staticmethod
    def is_check(board: Board) -> bool:
        """白のキングが王手されているか確認"""
        return len(Rules.get_checker_positions(board)) > 0


# 駒の種類ごとの判定関数（全種類を網羅すること）
LEGALITY_CHECKS: Dict[PieceType, Callable[[Board, Position, Position], bool]] = {
    PieceType.PAWN: Rules._is_legal_pawn_move,
    PieceType.BISHOP: Rules._is_legal_bishop_move,
    PieceType.KNIGHT: Rules._is_legal_knight_move,
    PieceType.ROOK: Rules._is_legal_rook_move,
    PieceType.QUEEN: Rules._is_legal_queen_move,
    PieceType.KING: Rules._is_legal_king_move,
}
