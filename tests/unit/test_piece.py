"""
単体テスト: 駒の定義のテスト
駒の文字表記と移動済みフラグを確認
"""

import pytest
from dataclasses import FrozenInstanceError

from src.engine import Piece, Color, PieceType, PIECE_LETTERS, PushChessError, ErrorKind


class TestPiece:
    """駒のテストクラス"""

    @pytest.mark.parametrize("letter,piece_type", [
        ("P", PieceType.PAWN),
        ("B", PieceType.BISHOP),
        ("N", PieceType.KNIGHT),
        ("R", PieceType.ROOK),
        ("Q", PieceType.QUEEN),
        ("K", PieceType.KING),
    ])
    def test_from_letter_reads_both_colors(self, letter, piece_type):
        """大文字は白、小文字は黒として読めることを確認"""
        white = Piece.from_letter(letter)
        black = Piece.from_letter(letter.lower())

        assert white == Piece(piece_type, Color.WHITE)
        assert black == Piece(piece_type, Color.BLACK)
        assert not white.has_moved and not black.has_moved

    @pytest.mark.parametrize("letter", ["x", "Z", "1", "/", " ", "?"])
    def test_from_letter_rejects_unknown(self, letter):
        """知らない文字は INVALID_NOTATION になることを確認"""
        with pytest.raises(PushChessError) as exc_info:
            Piece.from_letter(letter)
        assert exc_info.value.kind == ErrorKind.INVALID_NOTATION

    def test_letter_table_covers_every_type(self):
        """全ての駒種に表記文字があることを確認"""
        assert set(PIECE_LETTERS) == set(PieceType)
        assert len(set(PIECE_LETTERS.values())) == len(PieceType)

    def test_letter_uses_case_for_color(self):
        assert Piece(PieceType.QUEEN, Color.WHITE).letter == "Q"
        assert Piece(PieceType.QUEEN, Color.BLACK).letter == "q"
        assert str(Piece(PieceType.KNIGHT, Color.BLACK)) == "n"

    def test_mark_moved_returns_new_piece(self):
        """mark_moved は元の駒を変えずに新しい駒を返すことを確認"""
        piece = Piece(PieceType.ROOK, Color.WHITE)
        moved = piece.mark_moved()

        assert moved.has_moved
        assert not piece.has_moved
        assert moved.piece_type == piece.piece_type and moved.color == piece.color

    def test_piece_is_immutable(self):
        piece = Piece(PieceType.KING, Color.WHITE)
        with pytest.raises(FrozenInstanceError):
            piece.has_moved = True

    def test_to_dict(self):
        piece = Piece(PieceType.BISHOP, Color.BLACK, has_moved=True)
        assert piece.to_dict() == {"type": "BISHOP", "color": "BLACK", "has_moved": True}
