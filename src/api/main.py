"""
Push Chess FastAPI サーバ
ゲームの状態管理とエンジン呼び出しのエンドポイントを提供
"""

import logging
import uuid
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ..engine import (
    Board, ErrorKind, Move, MoveType, PushChessError, Resolver, Rules,
    checkers, moveable_pieces,
    parse_board, parse_square, serialize_board, square_name,
)
from ..engine.initial_setup import STARTING_FEN

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Push Chess API",
    description="Push Chess ルールエンジンのバックエンドAPI",
    version="1.0.0"
)

# CORS設定（フロントエンドからのアクセスを許可）
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# エラー種別ごとのHTTPステータス
ERROR_STATUS = {
    ErrorKind.INVALID_NOTATION: 400,
    ErrorKind.OUT_OF_BOUNDS: 400,
    ErrorKind.ILLEGAL_MOVE: 400,
    ErrorKind.NO_PIECE_AT_SOURCE: 400,
    ErrorKind.UNIMPLEMENTED: 501,
}

# ゲームの状態を保持する辞書
games: Dict[str, 'GameState'] = {}


class GameState:
    """ゲームの状態を管理するクラス"""

    def __init__(self, game_id: str, board: Board):
        self.game_id = game_id
        self.board = board
        self.move_history: List[dict] = []

    def to_dict(self) -> dict:
        """ゲーム状態を辞書形式に変換"""
        return {
            "game_id": self.game_id,
            "fen": serialize_board(self.board),
            **self.board.to_dict(),
            "moveable_pieces": moveable_pieces(self.board),
            "checkers": checkers(self.board),
            "move_count": len(self.move_history),
        }


# Pydanticモデル（リクエスト/レスポンス用）

class NewGameRequest(BaseModel):
    fen: Optional[str] = None


class NewGameResponse(BaseModel):
    game_id: str
    message: str
    game_state: dict


class MoveRequest(BaseModel):
    from_square: str
    to_square: str


class MoveResponse(BaseModel):
    success: bool
    message: str
    game_state: dict


def _engine_error(error: PushChessError) -> HTTPException:
    """エンジンの例外をHTTPの例外に変換"""
    return HTTPException(status_code=ERROR_STATUS[error.kind], detail=error.to_dict())


def _get_game(game_id: str) -> GameState:
    if game_id not in games:
        raise HTTPException(status_code=404, detail="ゲームが見つかりません")
    return games[game_id]


# エンドポイント

@app.get("/api")
async def root():
    """APIルート"""
    return {
        "message": "Push Chess API へようこそ",
        "version": "1.0.0",
        "endpoints": [
            "/new_game",
            "/apply_move/{game_id}",
            "/get_legal_moves/{game_id}",
            "/get_game/{game_id}",
            "/delete_game/{game_id}",
        ]
    }


@app.post("/new_game", response_model=NewGameResponse)
async def new_game(request: Optional[NewGameRequest] = None):
    """
    新しいゲームを開始する
    FEN を省略するとデモ用の初期盤面から始まる
    """
    fen = request.fen if request is not None and request.fen is not None else STARTING_FEN
    game_id = str(uuid.uuid4())
    try:
        game_state = GameState(game_id, parse_board(fen))
        state_dict = game_state.to_dict()
    except PushChessError as e:
        raise _engine_error(e)

    games[game_id] = game_state
    logger.info("new game %s: %s", game_id, state_dict["fen"])

    return NewGameResponse(
        game_id=game_id,
        message="新しいゲームを開始しました",
        game_state=state_dict
    )


@app.get("/get_game/{game_id}")
async def get_game(game_id: str):
    """ゲームの状態を取得"""
    return _get_game(game_id).to_dict()


@app.post("/apply_move/{game_id}", response_model=MoveResponse)
async def apply_move(game_id: str, move_request: MoveRequest):
    """
    手を適用する
    動かせるのはまだ動いていない白の駒だけ
    """
    game_state = _get_game(game_id)
    board = game_state.board

    # 大文字のマス目も受け付ける
    try:
        move = Move.from_squares(move_request.from_square, move_request.to_square)
    except PushChessError as e:
        raise _engine_error(e)

    if move.from_pos not in Rules.get_moveable_positions(board):
        raise HTTPException(status_code=400, detail={
            "kind": "NOT_MOVEABLE",
            "message": f"{move.to_dict()['from']} は動かせる駒ではありません",
        })

    try:
        new_board = Resolver.apply_move(board, move)
    except PushChessError as e:
        logger.info("rejected move %s in game %s: %s", move, game_id, e.kind.name)
        raise _engine_error(e)

    piece = board.get_piece(move.from_pos)

    # 盤面は不変なので参照を差し替えるだけ
    game_state.board = new_board
    game_state.move_history.append({
        **move.to_dict(),
        "piece": piece.letter,
        "type": MoveType.for_piece_type(piece.piece_type).name,
    })

    return MoveResponse(
        success=True,
        message="手を適用しました",
        game_state=game_state.to_dict()
    )


@app.get("/get_legal_moves/{game_id}")
async def get_legal_moves(game_id: str):
    """動かせる駒ごとの移動先を取得"""
    game_state = _get_game(game_id)
    board = game_state.board

    legal_moves = {}
    try:
        for square in moveable_pieces(board):
            destinations = Rules.get_legal_destinations(board, parse_square(square))
            legal_moves[square] = [square_name(position) for position in destinations]
    except PushChessError as e:
        raise _engine_error(e)

    return {
        "legal_moves": legal_moves,
        "count": sum(len(destinations) for destinations in legal_moves.values()),
    }


@app.delete("/delete_game/{game_id}")
async def delete_game(game_id: str):
    """ゲームを削除"""
    _get_game(game_id)
    del games[game_id]
    return {"message": "ゲームを削除しました"}
