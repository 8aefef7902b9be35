"""Response envelope helpers shared by the API routers"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from webui.models.schemas import ResponseModel


def envelope(status: int, msg: Any, body: Optional[Any] = None) -> JSONResponse:
    """Wrap a result in a ResponseModel and use its status as the HTTP status"""
    model = ResponseModel[Any](status=status, msg=str(msg), body=body)
    return JSONResponse(status_code=status, content=jsonable_encoder(model))
