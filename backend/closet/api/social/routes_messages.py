"""Direct message routes."""
from typing import Optional

from fastapi import APIRouter, Depends, status

from closet.api.deps import get_current_identity, get_db
from closet.api.schemas import MessageResponse
from closet.domain.common.types import CamelModel, Identity, SellerView
from closet.domain.social.services import MessageService
from closet.infra.db.session import Database

router = APIRouter()


class SendMessageRequest(CamelModel):
    """Send message request. Missing recipient or content is a 400."""
    recipient_id: Optional[int] = None
    content: Optional[str] = None
    dress_id: Optional[int] = None


class SendMessageResponse(CamelModel):
    message: str
    data: MessageResponse


class ConversationResponse(CamelModel):
    """Conversation summary with one counterparty."""
    user: Optional[SellerView] = None
    last_message: MessageResponse
    unread_count: int


class ConversationsResponse(CamelModel):
    conversations: list[ConversationResponse]


class ThreadResponse(CamelModel):
    messages: list[MessageResponse]


@router.post("", response_model=SendMessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(
    request: SendMessageRequest,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Send a direct message, optionally about a dress."""
    message = MessageService(db).send_message(
        current_user.id,
        request.recipient_id,
        request.content,
        dress_id=request.dress_id,
    )
    return SendMessageResponse(message="Message sent", data=MessageResponse.from_entity(message))


# Declared before /{user_id} so "conversations" is not parsed as an id.
@router.get("/conversations", response_model=ConversationsResponse)
async def list_conversations(
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """One entry per counterparty: latest message and unread count."""
    conversations = MessageService(db).list_conversations(current_user.id)
    return ConversationsResponse(
        conversations=[
            ConversationResponse(
                user=c.user,
                last_message=MessageResponse.from_entity(c.last_message),
                unread_count=c.unread_count,
            )
            for c in conversations
        ]
    )


@router.get("/{user_id}", response_model=ThreadResponse)
def get_thread(
    user_id: int,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Full thread with one user, oldest first. Marks incoming messages read."""
    thread = MessageService(db).read_thread(current_user.id, user_id)
    return ThreadResponse(messages=[MessageResponse.from_entity(m) for m in thread])
