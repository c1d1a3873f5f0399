"""
手の適用（押し出し・入れ替え）を解決するモジュール

押し出しは再帰的に解決する:
1. 移動先が空きマスなら入れ替えて終わり
2. 駒があれば、その駒を同じ方向へ1マス押し出す（再帰）
3. 一番奥の入れ替えから順に戻りながら、各段で入れ替えを行う
途中で盤外に出たら手全体が不正になり、元の盤面はそのまま残る
"""

from .board import Board, Position, is_valid_position, square_name
from .errors import ErrorKind, PushChessError
from .move import Move, MoveType
from .rules import Rules


class Resolver:
    """手を盤面に適用して新しい盤面を作るクラス"""

    @staticmethod
    def apply_move(board: Board, move: Move) -> Board:
        """
        盤面に手を適用した新しい盤面を返す
        元の盤面は変更しない
        """
        from_pos, to_pos = move.from_pos, move.to_pos

        # 盤外チェックは合法性チェックより先
        if not is_valid_position(to_pos):
            raise PushChessError(ErrorKind.OUT_OF_BOUNDS, f"Destination {to_pos} is off the board")
        if not is_valid_position(from_pos):
            raise PushChessError(ErrorKind.OUT_OF_BOUNDS, f"Source {from_pos} is off the board")

        piece = board.get_piece(from_pos)
        if piece is None:
            raise PushChessError(ErrorKind.NO_PIECE_AT_SOURCE, f"No piece at {square_name(from_pos)}")

        if not Rules.is_legal_move(board, from_pos, to_pos, piece):
            raise PushChessError(ErrorKind.ILLEGAL_MOVE, f"Illegal chess move: {move}")

        if MoveType.for_piece_type(piece.piece_type) == MoveType.SWAP:
            return Resolver._swap(board, from_pos, to_pos, is_instigator=True)
        return Resolver._push(board, from_pos, to_pos, is_instigator=True)

    @staticmethod
    def _push(board: Board, from_pos: Position, to_pos: Position, is_instigator: bool) -> Board:
        """移動先の駒を同じ方向へ押し出してから入れ替える"""
        if not is_valid_position(to_pos):
            raise PushChessError(ErrorKind.ILLEGAL_MOVE, "Push out of bounds")

        if not board.is_occupied(to_pos):
            return Resolver._swap(board, from_pos, to_pos, is_instigator)

        direction = Move(from_pos, to_pos).direction
        next_pos = (to_pos[0] + direction[0], to_pos[1] + direction[1])
        pushed = Resolver._push(board, to_pos, next_pos, is_instigator=False)
        return Resolver._swap(pushed, from_pos, to_pos, is_instigator)

    @staticmethod
    def _swap(board: Board, from_pos: Position, to_pos: Position, is_instigator: bool) -> Board:
        """
        2マスの中身を入れ替える
        移動先に着く駒は、手を指した本人の場合だけ移動済みになる
        """
        mover = board.get_piece(from_pos)
        if is_instigator and mover is not None:
            mover = mover.mark_moved()
        return board.with_pieces({
            from_pos: board.get_piece(to_pos),
            to_pos: mover,
        })
