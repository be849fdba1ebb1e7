"""페이지네이션 유틸리티"""

from fastapi import Query


class PageParams:
    """페이지네이션 쿼리 파라미터 의존성 (page는 1부터)

    Example::

        @router.get("/history", response_model=ListAPIResponse[HistoryRecordResponse])
        async def get_history(page_params: PageParams = Depends()):
            ...
    """

    def __init__(
        self,
        page: int = Query(1, ge=1, description="페이지 번호"),
        size: int = Query(20, ge=1, le=100, description="페이지 크기"),
    ):
        self.page = page
        self.size = size
