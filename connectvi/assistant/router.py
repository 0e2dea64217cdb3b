from fastapi import APIRouter, Depends

from connectvi.timetable import Timetable, get_timetable
from connectvi.assistant.schemas import AssistantReply, ChatMessage, Greeting, ParsedQuery
from connectvi.assistant.service import QueryInterpreter, GREETING

router = APIRouter()

def get_interpreter(timetable: Timetable = Depends(get_timetable)) -> QueryInterpreter:
    return QueryInterpreter(timetable)

@router.get("/greeting", response_model=Greeting)
def get_greeting():
    """Opening line of the trip assistant"""
    return Greeting(text=GREETING)

@router.post("/messages", response_model=AssistantReply)
def send_message(
    message: ChatMessage,
    interpreter: QueryInterpreter = Depends(get_interpreter)
):
    """Answer a free-text trip request with matching departures"""
    return interpreter.respond(message.text)

@router.post("/parse", response_model=ParsedQuery)
def parse_message(
    message: ChatMessage,
    interpreter: QueryInterpreter = Depends(get_interpreter)
):
    """Show which stops and hour window a message resolves to"""
    return interpreter.parse(message.text)
