"""
Schedule endpoints — trainer availability on a date.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_clock, get_schedule_config, get_store
from app.core.clock import Clock
from app.db.store import DataStore
from app.engine.scheduling import ScheduleConfig, compute_all_trainer_schedules, compute_trainer_schedule
from app.schemas.schedule import TrainerSchedule

router = APIRouter()


@router.get("", summary="Get trainer schedules for a date.", response_model=list[TrainerSchedule], )
def get_schedules(date: datetime.date = Query(..., description="Calendar date (YYYY-MM-DD)"),
                  trainer_name: Optional[str] = Query(None, min_length=1, alias="trainerName",
                                                      description="Restrict to one trainer"),
                  store: DataStore = Depends(get_store), clock: Clock = Depends(get_clock),
                  config: ScheduleConfig = Depends(get_schedule_config), ):
    now = clock.now()
    if trainer_name:
        return [compute_trainer_schedule(store, trainer_name, date, now, config)]
    return compute_all_trainer_schedules(store, date, now, config)
