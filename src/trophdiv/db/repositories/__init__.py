from .result_repo import ResultRepository
