"""
盤面のFEN風表記の読み書き

配置部分（8段目→1段目、'/'区切り）だけを扱う。
手番・キャスリング・アンパッサン・手数の欄は固定のプレースホルダ。
"""

from typing import List, Optional

from .board import BOARD_SIZE, Board
from .errors import ErrorKind, PushChessError
from .piece import Piece

# 出力時に配置の後ろへ付ける固定の欄
PLACEHOLDER_SUFFIX = "w HAha - 0 1"

DIGITS = "0123456789"


def parse_row(row_text: str) -> List[Optional[Piece]]:
    """
    1段分の表記を読み込む
    数字は空きマスの数、英字は駒
    """
    cells: List[Optional[Piece]] = []
    for char in row_text:
        if char in DIGITS:
            cells.extend([None] * int(char))
        else:
            cells.append(Piece.from_letter(char))
    if len(cells) != BOARD_SIZE:
        raise PushChessError(
            ErrorKind.INVALID_NOTATION,
            f"Row {row_text!r} describes {len(cells)} squares, expected {BOARD_SIZE}"
        )
    return cells


def parse_board(text: str) -> Board:
    """
    FEN風の文字列から盤面を作成
    最初の空白までの配置部分だけを読み、残りは無視する
    """
    placement = text.split(" ")[0]
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise PushChessError(
            ErrorKind.INVALID_NOTATION,
            f"Placement {placement!r} has {len(rows)} rows, expected {BOARD_SIZE}"
        )
    return Board([parse_row(row) for row in rows])


def serialize_row(cells) -> str:
    """1段分を表記に変換（空きマスの連続は数字にまとめる）"""
    text = ""
    blank_count = 0
    for cell in cells:
        if cell is None:
            blank_count += 1
            continue
        if blank_count:
            text += str(blank_count)
            blank_count = 0
        text += cell.letter
    if blank_count:
        text += str(blank_count)
    return text


def serialize_board(board: Board) -> str:
    """盤面をFEN風の文字列に変換"""
    placement = "/".join(serialize_row(row) for row in board.cells)
    return f"{placement} {PLACEHOLDER_SUFFIX}"
