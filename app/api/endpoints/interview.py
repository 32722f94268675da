import json
import logging

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status
from fastapi.responses import Response
from pydantic import ValidationError

from app.api.deps import get_use_case
from app.api.schemas import (
    AnswerResponse,
    AnswerSubmissionResponse,
    FinalReportResponse,
    InterviewAnswerRequest,
    InterviewOptionsResponse,
    InterviewStartRequest,
    InterviewStateResponse,
)
from app.core.exceptions import InterviewError, SessionNotFoundError
from app.core.models import ExperienceLevel, Role
from app.core.use_case import InterviewUseCase

logger = logging.getLogger(__name__)
interview_router = APIRouter()


@interview_router.get("/options", response_model=InterviewOptionsResponse)
async def get_options():
    return InterviewOptionsResponse(
        roles=[role.value for role in Role],
        experience_levels=[level.value for level in ExperienceLevel],
    )


@interview_router.post("/sessions", response_model=InterviewStateResponse, status_code=status.HTTP_201_CREATED)
async def start_interview(request: InterviewStartRequest):
    use_case = get_use_case()
    session = await use_case.start_interview(request.to_profile(), request.session_id)
    logger.info(f"Session {session.session_id} started with {len(session.questions)} questions")
    return InterviewStateResponse.from_session(session)


@interview_router.get("/sessions/{session_id}", response_model=InterviewStateResponse)
async def get_interview(session_id: str):
    session = _require_session(get_use_case(), session_id)
    return InterviewStateResponse.from_session(session)


@interview_router.post("/sessions/{session_id}/answers", response_model=AnswerSubmissionResponse)
async def submit_answer(session_id: str, request: InterviewAnswerRequest):
    session, answer = await get_use_case().submit_answer(session_id, request.answer)
    return AnswerSubmissionResponse(
        accepted=answer is not None,
        answer=AnswerResponse.from_record(answer) if answer else None,
        state=InterviewStateResponse.from_session(session),
    )


@interview_router.get("/sessions/{session_id}/summary", response_model=FinalReportResponse)
async def get_summary(session_id: str):
    session, summary = get_use_case().summarize(session_id)
    return FinalReportResponse.from_summary(session, summary)


@interview_router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_interview(session_id: str):
    use_case = get_use_case()
    _require_session(use_case, session_id)
    use_case.delete_session(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@interview_router.get("/download-log")
async def download_interview_log(session_id: str = Query(..., description="Session ID")):
    use_case = get_use_case()
    session, summary = use_case.summarize(session_id)
    logger.info(f"Download log requested for session: {session_id}, status: {session.status.value}")

    questions = {question.id: question for question in session.questions}
    turns = [
        {
            "turn_id": index,
            "question": questions[answer.question_id].text,
            "question_type": questions[answer.question_id].type.value,
            "answer": answer.answer_text,
            "score": answer.score,
            "feedback": answer.feedback,
        }
        for index, answer in enumerate(session.answers, start=1)
    ]

    interview_log = {
        "participant_name": session.profile.name,
        "role": session.profile.role,
        "experience_level": session.profile.experience_level,
        "status": session.status.value,
        "turns": turns,
        "final_feedback": FinalReportResponse.from_summary(session, summary).model_dump(exclude={"answers"}),
        "events": use_case.logger.events_for(session_id),
    }

    json_content = json.dumps(interview_log, ensure_ascii=False, indent=2)

    return Response(
        content=json_content,
        headers={
            "Content-Disposition": f'attachment; filename="interview_log_{session_id}.json"',
        },
        media_type="application/json"
    )


def _require_session(use_case: InterviewUseCase, session_id: str):
    session = use_case.get_session(session_id)
    if session is None:
        logger.warning(f"Session {session_id} not found. Available sessions: {use_case.storage.session_ids()}")
        raise SessionNotFoundError(session_id)
    return session


async def _send(websocket: WebSocket, payload: dict) -> None:
    await websocket.send_text(json.dumps(payload, ensure_ascii=False))


async def websocket_interview(websocket: WebSocket):
    logger.info(f"WebSocket connection attempt from {websocket.client}")
    await websocket.accept()

    session_id = None
    use_case = get_use_case()

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await _send(websocket, {"type": "error", "message": "Invalid JSON message"})
                continue

            action = message.get("action")

            try:
                if action == "start":
                    request = InterviewStartRequest.model_validate(message.get("profile") or {})
                    session = await use_case.start_interview(request.to_profile(), message.get("session_id"))
                    session_id = session.session_id
                    state = InterviewStateResponse.from_session(session)
                    await _send(websocket, {"type": "session_id", "session_id": session_id})
                    await _send(websocket, {
                        "type": "question",
                        "question": state.current_question.model_dump() if state.current_question else None,
                        "state": state.model_dump(),
                    })

                elif action == "answer":
                    session_id = session_id or message.get("session_id")
                    if not session_id:
                        await _send(websocket, {"type": "error", "message": "Session not found. Start a new interview."})
                        continue

                    request = InterviewAnswerRequest.model_validate(message)
                    session, answer = await use_case.submit_answer(session_id, request.answer)
                    state = InterviewStateResponse.from_session(session)
                    if answer is None:
                        await _send(websocket, {"type": "error", "message": "Answer is empty."})
                        continue

                    await _send(websocket, {
                        "type": "evaluation",
                        "answer": AnswerResponse.from_record(answer).model_dump(),
                    })
                    if session.completed:
                        _, summary = use_case.summarize(session_id)
                        await _send(websocket, {
                            "type": "final_report",
                            "report": FinalReportResponse.from_summary(session, summary).model_dump(),
                        })
                    else:
                        await _send(websocket, {
                            "type": "question",
                            "question": state.current_question.model_dump() if state.current_question else None,
                            "state": state.model_dump(),
                        })

                elif action == "get_state":
                    session_id = session_id or message.get("session_id")
                    session = use_case.get_session(session_id) if session_id else None
                    if session:
                        await _send(websocket, {"type": "state", "state": InterviewStateResponse.from_session(session).model_dump()})
                    else:
                        await _send(websocket, {"type": "error", "message": "Session not found. Start a new interview."})

                else:
                    await _send(websocket, {"type": "error", "message": f"Unknown action: {action}"})

            except ValidationError as e:
                await _send(websocket, {"type": "error", "message": f"Invalid request: {e.errors()}"})
            except InterviewError as e:
                logger.info(f"Interview error on websocket for session {session_id}: {e}")
                await _send(websocket, {"type": "error", "message": str(e)})

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected for session {session_id}, session preserved")
