import logging
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from linesolver import solve
from linesolver.errors import PuzzleInputError

logger = logging.getLogger("linesolver.api")

app = FastAPI()

class SolveRequest(BaseModel):
    board: List[str]  # 1 行 1 文字列（例: ["R.R", "G2G"]）

@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid rows, and returns the edges of each color path.
    """
    try:
        return solve(request.board)
    except PuzzleInputError as e:
        # 盤面の形式エラー・端点の個数エラーはクライアント側の問題
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("solver failed")
        raise HTTPException(status_code=500, detail=str(e))
