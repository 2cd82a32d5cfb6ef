from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import (
    AlreadyReviewedError,
    DomainError,
    DuplicateEmployeeError,
    InsufficientBalanceError,
    InvalidInputError,
    NotFoundError,
)


def _balances_json(balances) -> dict:
    return {category.value: days for category, days in balances.items()}


def register(app: Flask, container: Container) -> None:
    desk = container.leave_desk

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise InvalidInputError("Request body must be a JSON object")
        return data

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        body = {"error": type(exc).__name__, "message": str(exc)}
        if isinstance(exc, NotFoundError):
            return jsonify(body), 404
        if isinstance(exc, (DuplicateEmployeeError, AlreadyReviewedError)):
            return jsonify(body), 409
        if isinstance(exc, InsufficientBalanceError):
            body.update(have=exc.have, need=exc.need)
            return jsonify(body), 422
        return jsonify(body), 400

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify(
            [
                {
                    "employee_id": e.employee_id,
                    "full_name": e.full_name,
                    "balances": _balances_json(e.balances),
                }
                for e in container.employees_repo.all()
            ]
        )

    @app.route("/employees/<employee_id>/balances", methods=["GET"], endpoint="employee_balances")
    def employee_balances(employee_id: str):
        return jsonify(_balances_json(desk.balances_of(employee_id)))

    @app.route("/employees/<employee_id>/requests", methods=["GET"], endpoint="employee_requests")
    def employee_requests(employee_id: str):
        return jsonify([r.to_dict() for r in desk.history_of(employee_id)])

    @app.route("/requests", methods=["POST"], endpoint="submit_request")
    def submit_request():
        data = _json_body()
        rid = desk.submit(
            str(data.get("employee_id") or ""),
            parse_iso_date(data.get("start_date")),
            parse_iso_date(data.get("end_date")),
            str(data.get("category") or ""),
            str(data.get("reason") or ""),
        )
        return jsonify(desk.get(rid).to_dict()), 201

    @app.route("/requests/pending", methods=["GET"], endpoint="pending_requests")
    def pending_requests():
        return jsonify([r.to_dict() for r in desk.pending_queue()])

    @app.route("/requests/history", methods=["GET"], endpoint="decided_requests")
    def decided_requests():
        return jsonify([r.to_dict() for r in desk.decided()])

    @app.route("/requests/<int:request_id>", methods=["GET"], endpoint="get_request")
    def get_request(request_id: int):
        return jsonify(desk.get(request_id).to_dict())

    @app.route("/requests/<int:request_id>/review", methods=["POST"], endpoint="review_request")
    def review_request(request_id: int):
        data = _json_body()
        approve = data.get("approve")
        if not isinstance(approve, bool):
            raise InvalidInputError("'approve' must be true or false")
        reviewer_id = str(data.get("reviewer_id") or "").strip()
        if not reviewer_id:
            raise InvalidInputError("'reviewer_id' is required")

        processed = desk.review(request_id, approve, reviewer_id)
        return jsonify({"processed": processed, "request": desk.get(request_id).to_dict()})
