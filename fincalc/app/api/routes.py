"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Callable, Dict, Tuple, Type

from flask import Blueprint, abort, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest, NotFound

from fincalc import __version__
from fincalc.core import (
    apr_to_apy,
    apy_to_apr,
    calculate_compound_interest,
    calculate_emi,
    calculate_fixed_deposit,
    calculate_loan,
    calculate_loan_payoff,
    calculate_mortgage,
    calculate_retirement,
    calculate_sip,
    calculate_tax,
)
from fincalc.logging_config import get_logger
from fincalc.schemas import (
    CompoundInterestRequest,
    EMIRequest,
    FixedDepositRequest,
    LoanPayoffRequest,
    LoanRequest,
    MortgageRequest,
    RateConversionRequest,
    RetirementRequest,
    SIPRequest,
    TaxRequest,
)
from fincalc.schemas.ping import PingResponse

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)

Calculator = Tuple[Type[BaseModel], Callable[[Any], BaseModel]]

CALCULATORS: Dict[str, Calculator] = {
    "loan": (LoanRequest, calculate_loan),
    "emi": (EMIRequest, calculate_emi),
    "mortgage": (MortgageRequest, calculate_mortgage),
    "compound-interest": (CompoundInterestRequest, calculate_compound_interest),
    "fixed-deposit": (FixedDepositRequest, calculate_fixed_deposit),
    "sip": (SIPRequest, calculate_sip),
    "tax": (TaxRequest, calculate_tax),
    "retirement": (RetirementRequest, calculate_retirement),
    "loan-payoff": (LoanPayoffRequest, calculate_loan_payoff),
    "apr-to-apy": (
        RateConversionRequest,
        lambda req: apr_to_apy(req.rate, req.compounding_frequency),
    ),
    "apy-to-apr": (
        RateConversionRequest,
        lambda req: apy_to_apr(req.rate, req.compounding_frequency),
    ),
}


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    errors = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(NotFound)
def _handle_not_found(exc: NotFound):
    return jsonify({"detail": exc.description}), HTTPStatus.NOT_FOUND


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/calc")
def list_calculators() -> Any:
    return jsonify({"calculators": sorted(CALCULATORS)})


@api_bp.post("/calc/<name>")
def calculate(name: str) -> Any:
    """Validate the payload for ``name``, run the calculator, return its result."""
    if name not in CALCULATORS:
        abort(HTTPStatus.NOT_FOUND, description=f"unknown calculator '{name}'")
    schema, calculator = CALCULATORS[name]

    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = schema.model_validate(raw_payload)
    result = calculator(payload)

    logger.info("calculation completed", extra={"calculator": name})
    return jsonify(result.model_dump(mode="json"))
