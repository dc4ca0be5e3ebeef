from abc import ABC, abstractmethod
from enum import StrEnum, auto
from typing import Any, Callable, Protocol, runtime_checkable

from ..utilities.logger import logger
from .api_result import ApiResult


class QueryContext(StrEnum):
    """ Where a query is executed. Affects defaults such as the result limit. """
    INLINE_QUERY = auto()
    SPECIAL_PAGE = auto()
    CONCEPT_DESCRIPTION = auto()

@runtime_checkable
class QueryProcessor(Protocol):
    """ Builds executable queries from query text. Provided by the query language implementation. """
    def add_this_printout(self, printouts: list[Any], parameters: dict[str, Any]) -> None: ...
    def get_processed_params(self, parameters: dict[str, Any], printouts: list[Any]) -> dict[str, Any]: ...
    def create_query(self, query_string: str, params: dict[str, Any], context: QueryContext, format_: str, printouts: list[Any]) -> Any: ...

@runtime_checkable
class QueryStore(Protocol):
    """ Executes queries. Provided by the storage backend. """
    def get_query_result(self, query: Any) -> Any: ...

@runtime_checkable
class QueryResultFormatter(Protocol):
    """ Turns a query result into a serializable structure. """
    def set_is_raw_mode(self, is_raw_mode: bool) -> None: ...
    def run_formatter(self) -> None: ...
    def get_continue_offset(self) -> int | None: ...
    def get_type(self) -> str: ...
    def get_result(self) -> Any: ...


QUERY_CONTINUE_OFFSET = "query-continue-offset"

class QueryApi(ABC):
    """ Base for API modules that run semantic queries.

    Subclasses implement execute(), typically as: get_query() -> get_query_result() -> add_query_result(). """

    def __init__(self, processor: QueryProcessor, store: QueryStore, formatter_factory: Callable[[Any], QueryResultFormatter], result: ApiResult | None = None) -> None:
        self.processor = processor
        self.store = store
        self.formatter_factory = formatter_factory
        self.result = result if result is not None else ApiResult()

    @abstractmethod
    def execute(self) -> None:
        """ Run the module, adding its output to self.result. """

    def get_query(self, query_string: str, printouts: list[Any], parameters: dict[str, Any] | None = None) -> Any:
        """ Returns a query object for the query string and list of printouts. """
        if parameters is None:
            parameters = {}

        self.processor.add_this_printout(printouts, parameters)

        return self.processor.create_query(
            query_string,
            self.processor.get_processed_params(parameters, printouts),
            QueryContext.SPECIAL_PAGE,
            '',
            printouts
        )

    def get_query_result(self, query: Any) -> Any:
        """ Run the query and return the result. """
        return self.store.get_query_result(query)

    def add_query_result(self, query_result: Any) -> None:
        """ Add the formatted query result to the output. A continuation offset is always added,
        even if the result is at its size limit, so clients can fetch the next page. """
        formatter = self.formatter_factory(query_result)
        formatter.set_is_raw_mode(self.result.get_is_raw_mode())
        formatter.run_formatter()

        continue_offset = formatter.get_continue_offset()
        if continue_offset:
            logger.debug(f"Query has further results, continuing at offset {continue_offset}.")
            self.result.disable_size_check()
            try:
                self.result.add_value(None, QUERY_CONTINUE_OFFSET, continue_offset)
            finally:
                self.result.enable_size_check()

        self.result.add_value(None, formatter.get_type(), formatter.get_result())
