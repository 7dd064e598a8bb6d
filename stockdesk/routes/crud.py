"""Shared CRUD handlers for the JSON-file collections.

``build_crud_blueprint(resource, url_prefix)`` returns a blueprint with

- GET    {prefix}          → array of records
- GET    {prefix}/<id>     → { success, data }           (only if with_get)
- POST   {prefix}          → { success, message, data }
- PUT    {prefix}/<id>     → { success, message, data }
- DELETE {prefix}/<id>     → { success, message }

The store is looked up on the app (see ``create_app``) by resource name.
Errors: 404 for unknown or malformed ids, 500 when the file can't be written.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from stockdesk.services.messages import message
from stockdesk.services.store_service import JsonStore, PersistenceError, RecordNotFound
from stockdesk.utils.ids import parse_record_id


def get_store(resource: str) -> JsonStore:
    return current_app.extensions["stockdesk.stores"][resource]


def _msg(resource: str, key: str) -> str:
    return message(current_app.config["LOCALE"], resource, key)


def _resp_error(message_text: str, status: int):
    return jsonify({"success": False, "message": message_text}), status


def _body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def build_crud_blueprint(resource: str, url_prefix: str, *, with_get: bool = False) -> Blueprint:
    bp = Blueprint(resource, __name__, url_prefix=url_prefix)

    @bp.get("")
    def list_records():
        return jsonify(get_store(resource).list())

    if with_get:

        @bp.get("/<raw_id>")
        def get_record(raw_id: str):
            record_id = parse_record_id(raw_id)
            if record_id is None:
                return _resp_error(_msg(resource, "not_found"), 404)
            try:
                record = get_store(resource).get(record_id)
            except RecordNotFound:
                return _resp_error(_msg(resource, "not_found"), 404)
            return jsonify({"success": True, "data": record})

    @bp.post("")
    def create_record():
        try:
            record = get_store(resource).create(_body())
        except PersistenceError:
            return _resp_error(_msg(resource, "create_failed"), 500)
        return jsonify({"success": True, "message": _msg(resource, "created"), "data": record})

    @bp.put("/<raw_id>")
    def update_record(raw_id: str):
        record_id = parse_record_id(raw_id)
        if record_id is None:
            return _resp_error(_msg(resource, "not_found"), 404)
        try:
            record = get_store(resource).update(record_id, _body())
        except RecordNotFound:
            return _resp_error(_msg(resource, "not_found"), 404)
        except PersistenceError:
            return _resp_error(_msg(resource, "update_failed"), 500)
        return jsonify({"success": True, "message": _msg(resource, "updated"), "data": record})

    @bp.delete("/<raw_id>")
    def delete_record(raw_id: str):
        record_id = parse_record_id(raw_id)
        if record_id is None:
            return _resp_error(_msg(resource, "not_found"), 404)
        try:
            get_store(resource).delete(record_id)
        except RecordNotFound:
            return _resp_error(_msg(resource, "not_found"), 404)
        except PersistenceError:
            return _resp_error(_msg(resource, "delete_failed"), 500)
        return jsonify({"success": True, "message": _msg(resource, "deleted")})

    return bp
