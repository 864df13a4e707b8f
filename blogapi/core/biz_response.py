from typing import Any, Optional

from fastapi.responses import JSONResponse

# 状态码 -> 错误类别
ERROR_KINDS = {
    400: "bad_request",
    403: "forbidden",
    404: "not_found",
    409: "conflict",
    422: "validation",
    500: "internal",
}


class BizResponse(JSONResponse):
    """
    统一响应：
    - 成功（< 400）：响应体就是 data 本身（单个实体或分页信封）
    - 失败（>= 400）：响应体固定为 {"ok": false, "kind": ..., "message": ...}
    """

    def __init__(
        self,
        data: Any = None,
        msg: Optional[str] = None,
        status_code: int = 200,
        kind: Optional[str] = None,
    ):
        if status_code >= 400:
            content = {
                "ok": False,
                "kind": kind or ERROR_KINDS.get(status_code, "error"),
                "message": msg or "",
            }
        else:
            content = data
        super().__init__(content=content, status_code=status_code)
