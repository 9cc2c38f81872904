"""Progress Data Initialization: triggers the multi-step seeding procedure.

Invariants:
    - POST runs the seeder on the service-role pool and reports aggregate counts
    - Any failure is 500 with message "初始化失敗" and the caught message as error
    - GET is advisory only: 405 with Allow: POST
"""

from fastapi import APIRouter, Depends

from hanami.api.deps import ElevatedAdapter
from hanami.api.route_handler import enveloped
from hanami.core.errors import MethodNotAllowedError
from hanami.services.progress_seeding import get_progress_seeder

router = APIRouter(prefix="/api/init-progress-data", tags=["progress"])


@router.post("")
@enveloped(
    message="進度資料初始化成功",
    failure_message="初始化失敗",
    expose_exception=True,
)
async def init_progress_data(
    adapter: ElevatedAdapter,
    seeder=Depends(get_progress_seeder),
):
    return await seeder(adapter)


@router.get("")
@enveloped()
async def init_progress_data_usage():
    raise MethodNotAllowedError("POST", "請使用 POST 方法初始化進度資料")
