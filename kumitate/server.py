import logging
import sys
from typing import Annotated

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kumitate.constants import DEFAULT_CSS_PREFIX, MAX_SHORTHAND_LENGTH, RECURSION_LIMIT
from kumitate.expansion import expand_line
from kumitate.parser import parse_shorthand
from kumitate.renderer import generate_jsx


logger = logging.getLogger(__name__)

# recursion limit increase for deep shorthand trees
sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))

app = FastAPI(title="Shorthand to JSX expander")

# Editor webviews and previews call this from arbitrary origins.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def nothing_to_expand(source: str) -> JSONResponse:
    return JSONResponse(
        {"detail": f"nothing to expand in {source!r}"},
        status_code=404,
    )


@app.get("/healthz")
async def healthz() -> JSONResponse:
    return JSONResponse({"status": "ok"})


@app.get("/expand")
async def expand_endpoint(
    shorthand: Annotated[str, Query(max_length=MAX_SHORTHAND_LENGTH)],
    prefix: str = DEFAULT_CSS_PREFIX,
    indent: str = "",
) -> JSONResponse:
    tree = parse_shorthand(shorthand)
    if tree is None:
        return nothing_to_expand(shorthand)

    try:
        markup = generate_jsx(tree, prefix, 0, indent)
    except Exception:
        logger.exception("failed to render %r", shorthand)
        return nothing_to_expand(shorthand)

    return JSONResponse({"markup": markup, "tree": tree.to_dict()})


@app.get("/expand/line")
async def expand_line_endpoint(
    line: str,
    prefix: str = DEFAULT_CSS_PREFIX,
) -> JSONResponse:
    expansion = expand_line(line, prefix)
    if expansion is None:
        return nothing_to_expand(line)

    return JSONResponse(expansion.to_dict())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)

# Usage:
# uv run -m kumitate.server
