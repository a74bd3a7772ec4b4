from eightpuzzle.service.request import handle_solve_request

__all__ = ["handle_solve_request"]
