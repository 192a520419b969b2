"""envref - warn about environment variables referenced in code but not defined"""

from envref.checker import check_env_variables, run_check

__version__ = "0.1.0"

__all__ = ["check_env_variables", "run_check", "__version__"]
