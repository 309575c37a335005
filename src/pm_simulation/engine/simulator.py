"""Pre-trade execution simulator.

simulate() is a pure function of (request, book): no I/O, no shared state,
never mutates the snapshot. Failures come back as SimulationError values.
"""
from src.pm_simulation.domain.errors import BookNotFound, SimulationOutcome
from src.pm_simulation.domain.models import BookWalk, OrderBook, SimulationRequest
from src.pm_simulation.engine.book_walker import walk_book
from src.pm_simulation.engine.metrics import calculate_metrics
from src.pm_simulation.engine.validator import validate_request


def simulate(request: SimulationRequest, book: OrderBook | None) -> SimulationOutcome:
    error = validate_request(request)
    if error is not None:
        return error
    if book is None:
        return BookNotFound(token_id=request.token_id)

    walk = walk_book(request, book)
    if not isinstance(walk, BookWalk):
        return walk
    return calculate_metrics(request, book, walk)
