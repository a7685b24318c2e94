"""JSON:API response class."""

from starlette.responses import JSONResponse

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JSONAPIResponse(JSONResponse):
    """JSONResponse served with the JSON:API media type."""

    media_type = JSONAPI_MEDIA_TYPE
