from functools import lru_cache

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from wordcover import WordCoverError, find_minimum_cover
from wordcover.config import DEFAULT_MASK_BITS, DEFAULT_WORDLIST_PATH
from wordcover.dictionary.loader import load_vocabulary
from wordcover.logging_utils import get_logger
from wordcover.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class CoverRequest(BaseModel):
    search_keys: list[str]
    vocabulary: list[str] | None = None  # None -> server-side default word list
    mask_bits: int = DEFAULT_MASK_BITS
    max_nodes: int | None = None


@lru_cache(maxsize=1)
def default_vocabulary() -> tuple[str, ...]:
    df = load_vocabulary(DEFAULT_WORDLIST_PATH)
    return tuple(df["word"])


@app.post("/api/cover")
def api_cover(request: CoverRequest):
    """
    Cover API endpoint.
    Receives search keys and an optional word list, returns the shortest cover.
    """
    try:
        vocabulary = request.vocabulary
        if vocabulary is None:
            vocabulary = default_vocabulary()
        result = find_minimum_cover(
            request.search_keys,
            vocabulary,
            mask_bits=request.mask_bits,
            max_nodes=request.max_nodes,
        )
        return build_result(result)
    except (WordCoverError, ValueError) as e:
        # 入力側の問題（キーが多すぎる・ビット幅が不正など）
        raise HTTPException(status_code=400, detail=str(e))
    except FileNotFoundError as e:
        logger.error("Default word list unavailable: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/health")
async def api_health():
    return {"status": "ok"}
