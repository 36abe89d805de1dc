"""Consolidated API router: the Task resource's HTTP surface."""

from typing import List

from fastapi import APIRouter

from backend.domains.tasks import routes as tasks
from backend.domains.tasks.schemas import Task, TaskNotFound

TASKS_TAG = "Tasks"

NOT_FOUND_RESPONSE = {
    404: {"model": TaskNotFound, "description": "the task was not found"},
}

# The count is served as a bare JSON number rather than text/plain.
COUNT_RESPONSE = {
    200: {"content": {"application/json": {"schema": {"type": "integer", "example": 15}}}},
}

router = APIRouter()

router.add_api_route(
    "/tasks",
    tasks.get_tasks,
    methods=["GET"],
    response_model=List[Task],
    summary="Return a tasks list",
    response_description="the list of tasks",
    tags=[TASKS_TAG]
)
# Must stay ahead of /tasks/{id} so "count" is never captured as an id.
router.add_api_route(
    "/tasks/count",
    tasks.count_tasks,
    methods=["GET"],
    response_model=int,
    summary="Get total task count",
    response_description="the total number of task",
    responses=COUNT_RESPONSE,
    tags=[TASKS_TAG]
)
router.add_api_route(
    "/tasks",
    tasks.create_task,
    methods=["POST"],
    response_model=Task,
    summary="create a new task",
    response_description="the task succefully created",
    responses={500: {"description": "some server error"}},
    tags=[TASKS_TAG]
)
router.add_api_route(
    "/tasks/{id}",
    tasks.get_task,
    methods=["GET"],
    response_model=Task,
    summary="get a task by id",
    response_description="the task was found",
    responses=NOT_FOUND_RESPONSE,
    tags=[TASKS_TAG]
)
router.add_api_route(
    "/tasks/{id}",
    tasks.delete_task,
    methods=["DELETE"],
    response_model=Task,
    summary="delete a task by id",
    response_description="the task was deleted",
    responses=NOT_FOUND_RESPONSE,
    tags=[TASKS_TAG]
)
router.add_api_route(
    "/tasks/{id}",
    tasks.update_task,
    methods=["PUT"],
    response_model=Task,
    summary="update a task by id",
    response_description="the updated task",
    responses=NOT_FOUND_RESPONSE,
    tags=[TASKS_TAG]
)
