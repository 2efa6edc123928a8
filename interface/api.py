"""FastAPI REST interface for the engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from ninarow.analyzer import Analyzer
from ninarow.core.board import MoveError
from ninarow.core.evaluator import Ordering
from ninarow.core.search import SearchEngine, Strategy
from ninarow.config import CONFIG
from ninarow.main import Engine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared game session; searches run on a copy of its board.
engine = Engine()
_board_lock = threading.Lock()


class MoveRequest(BaseModel):
    index: int


class SearchRequest(BaseModel):
    strategy: Optional[Strategy] = None
    ordering: Optional[Ordering] = None
    depth: Optional[int] = None


class ResetRequest(BaseModel):
    size: Optional[int] = None


class AnalyzeRequest(BaseModel):
    moves: Optional[List[int]] = None


def _state():
    board = engine.board
    result = board.classify_result()
    return {
        "size": board.size,
        "cells": [c.symbol if c is not None else None for c in board.cells],
        "turn": board.turn.symbol,
        "moves": list(board.move_history),
        "legal_moves": board.legal_moves(),
        "is_game_over": result.is_terminal,
        "result": result.value,
    }


def _search_engine(req: SearchRequest) -> SearchEngine:
    base = engine.search
    return SearchEngine(
        req.strategy or base.strategy,
        req.ordering or base.ordering,
        depth=req.depth if req.depth is not None else base.max_depth,
    )


@app.get("/board")
def get_board():
    with _board_lock:
        return _state()


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        try:
            engine.make_move(req.index)
        except MoveError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _state()


@app.post("/undo")
def undo_move():
    with _board_lock:
        try:
            engine.undo_move()
        except MoveError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _state()


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        search_board = engine.board.copy()

    best, stats = _search_engine(req).search_best_move(search_board)
    return {
        "best_move": best,
        "result": stats.result.value,
        "nodes": stats.nodes,
        "cache_hits": stats.cache_hits,
        "elapsed_ms": round(stats.elapsed * 1000, 3),
    }


@app.post("/analyze")
def analyze(req: AnalyzeRequest = AnalyzeRequest()):
    with _board_lock:
        search_board = engine.board.copy()
    analyzer = Analyzer(engine.search)
    if req.moves is None:
        return {"moves": analyzer.analyze_position(search_board)}
    try:
        return {"moves": analyzer.analyze_game(search_board.size, req.moves)}
    except MoveError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/reset")
def reset_board(req: ResetRequest = ResetRequest()):
    with _board_lock:
        try:
            engine.reset(req.size)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _state()
