"""
Player endpoints.

Profile lookup, dashboard summary, leaderboard, training history and
appointment booking.
"""

import uuid

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import EmailStr

from app.api.dependencies import get_clock, get_store, get_summary_config
from app.core.clock import Clock
from app.core.config import settings
from app.db.repositories.trainer import TrainerRepository
from app.db.store import DataStore
from app.engine.leaderboard import compute_leaderboard
from app.engine.summary import SummaryConfig
from app.models.appointment import Appointment
from app.models.training_session import TrainingSession
from app.schemas.appointment import AppointmentCreate
from app.schemas.filters import AppointmentFilter, SessionFilter
from app.schemas.leaderboard import LeaderboardEntry
from app.schemas.profile import PlayerProfileResponse
from app.schemas.summary import PlayerSummary
from app.services.booking_service import BookingService
from app.services.player_service import PlayerService

router = APIRouter()


@router.get("/leaderboard", summary="Get the player leaderboard.", response_model=list[LeaderboardEntry], )
def get_leaderboard(store: DataStore = Depends(get_store), clock: Clock = Depends(get_clock), ):
    return compute_leaderboard(store, clock.now())


@router.get("/trainers", summary="List known trainer names.", response_model=list[str], )
def list_trainers(store: DataStore = Depends(get_store)):
    return TrainerRepository(store).get_names()


@router.get("/by-email", summary="Find a player by email (case-insensitive).", response_model=PlayerProfileResponse, )
def get_player_by_email(email: EmailStr = Query(..., description="Player email"), store: DataStore = Depends(get_store),
                        clock: Clock = Depends(get_clock), ):
    return PlayerService(store, clock.now()).get_by_email(email)


@router.get("/{player_id}/summary", summary="Get the dashboard summary of a player.", response_model=PlayerSummary, )
def get_summary(player_id: uuid.UUID, store: DataStore = Depends(get_store), clock: Clock = Depends(get_clock),
                summary_config: SummaryConfig = Depends(get_summary_config), ):
    return PlayerService(store, clock.now(), summary_config).get_summary(str(player_id))


@router.get("/{player_id}/training-sessions", summary="List a player's training sessions, newest first.",
            response_model=list[TrainingSession], )
def list_sessions(player_id: uuid.UUID,
                  filter: SessionFilter = Query(SessionFilter.PAST, description="'past' (default) or 'all'"),
                  store: DataStore = Depends(get_store), clock: Clock = Depends(get_clock), ):
    return PlayerService(store, clock.now()).get_sessions(str(player_id), filter)


@router.get("/{player_id}/training-sessions/export", summary="Download a player's training history as CSV.",
            response_class=Response, )
def export_sessions(player_id: uuid.UUID,
                    filter: SessionFilter = Query(SessionFilter.PAST, description="'past' (default) or 'all'"),
                    store: DataStore = Depends(get_store), clock: Clock = Depends(get_clock), ):
    filename, content = PlayerService(store, clock.now()).export_sessions(str(player_id), filter)
    return Response(content=content, media_type="text/csv; charset=utf-8",
                    headers={ "Content-Disposition": f'attachment; filename="{filename}"' }, )


@router.get("/{player_id}/appointments", summary="List a player's appointments, soonest first.",
            response_model=list[Appointment], )
def list_appointments(player_id: uuid.UUID,
                      filter: AppointmentFilter = Query(AppointmentFilter.FUTURE,
                                                        description="'future' (default) or 'all'"),
                      store: DataStore = Depends(get_store), clock: Clock = Depends(get_clock), ):
    return PlayerService(store, clock.now()).get_appointments(str(player_id), filter)


@router.post("/{player_id}/appointments", summary="Book an appointment with a trainer.", response_model=Appointment,
             status_code=status.HTTP_201_CREATED, )
def book_appointment(player_id: uuid.UUID, data: AppointmentCreate, store: DataStore = Depends(get_store),
                     clock: Clock = Depends(get_clock), ):
    service = BookingService(store, clock.now(), prevent_double_booking=settings.PREVENT_DOUBLE_BOOKING)
    return service.book(str(player_id), data)


@router.delete("/{player_id}/appointments/{appointment_id}", summary="Cancel an appointment.",
               status_code=status.HTTP_204_NO_CONTENT, )
def cancel_appointment(player_id: uuid.UUID, appointment_id: uuid.UUID, store: DataStore = Depends(get_store),
                       clock: Clock = Depends(get_clock), ):
    BookingService(store, clock.now()).cancel(str(player_id), str(appointment_id))
