"""
FastAPI integration for sort negotiation.

SortParams declares the sorts an endpoint accepts and, used as a dependency,
validates every request against them before the endpoint runs.
"""

from typing import Optional, Union

from fastapi import Request

from fastsort.config import BaseAppSettings, get_settings
from fastsort.sorting.policy import SortPolicy, SortSpec
from fastsort.sorting.service import SortService


class SortParams:
    """
    Dependency factory for validated sort handling.

    Sorts may be declared as SortSpec instances or by bare name; bare names
    accept the directions configured in SORT_DEFAULT_DIRECTIONS.

    Attributes:
        policy: Declared sorts of the endpoint
        parameter: Name of the sort parameter group

    Example:
        ```python
        @app.get("/items/")
        def get_items(
            sort: SortService = Depends(
                SortParams(SortSpec(name="price"), "name")
            ),
        ):
            statement = sort.apply_to_query(select(Item), model=Item)
            return session.scalars(statement).all()
        ```
    """

    def __init__(
        self,
        *sorts: Union[SortSpec, str],
        parameter: Optional[str] = None,
        settings: Optional[BaseAppSettings] = None,
    ):
        settings = settings or get_settings()
        self.parameter = parameter or settings.SORT_QUERY_PARAMETER
        self.policy = SortPolicy(
            sort
            if isinstance(sort, SortSpec)
            else SortSpec(name=sort, allowed_directions=settings.SORT_DEFAULT_DIRECTIONS)
            for sort in sorts
        )

    def __call__(self, request: Request) -> SortService:
        """
        Build the request's SortService and validate the requested sorts.

        Args:
            request: Incoming request

        Returns:
            A validated SortService for this request

        Raises:
            SortError: If a requested sort is not allowed
        """
        service = SortService(request.query_params, parameter=self.parameter)
        service.handle_allowed_sorts(self.policy)
        return service
