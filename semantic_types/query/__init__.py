from .api_result import ApiResult
from .api_result_size_error import ApiResultSizeError
from .query_api import QueryApi, QueryContext, QueryProcessor, QueryStore, QueryResultFormatter, QUERY_CONTINUE_OFFSET
