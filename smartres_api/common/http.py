"""
Response envelopes shared by every blueprint.

    {"success": true,  "data": ..., "meta": {"message": ..., "total": ...}}
    {"success": false, "error": {"message": ..., "code": ..., "detail": ..., "errors": [...]}}
"""
from flask import jsonify

# machine-readable code for failures raised without an explicit one
STATUS_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    409: "CONSTRAINT_ERROR",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_ERROR",
}


def ok(data=None, status=200, **meta):
    payload = {"success": True, "data": data}
    meta = {k: v for k, v in meta.items() if v is not None}
    if meta:
        payload["meta"] = meta
    return jsonify(payload), status


def fail(message="Bad Request", status=400, code=None, detail=None, errors=None):
    err = {"message": message, "code": code or STATUS_CODES.get(status, "ERROR")}
    if detail is not None:
        err["detail"] = detail
    if errors is not None:
        err["errors"] = errors
    return jsonify({"success": False, "error": err}), status
