from fincalc.app.api.routes import CALCULATORS, api_bp

__all__ = ["CALCULATORS", "api_bp"]
