"""
Response class for game payloads.

Game fields are whatever the client sent, which can include strings
that are not encodable as UTF-8 (lone surrogates such as ``"\\ud800"``
are valid JSON escapes).  Rendering with ``ensure_ascii`` escapes them
instead of failing the request.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class GameJSONResponse(JSONResponse):

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("ascii")
