# lexflow/state.py
from . import ai_engine
from .editor import OrderEditor
from .models import ChatMessage
from .utils import new_id

DASHBOARD = "DASHBOARD"
ORDER = "ORDER"
REPORTS = "REPORTS"
CLIENTS = "CLIENTS"
DOCUMENTS = "DOCUMENTS"

VIEWS = (DASHBOARD, REPORTS, DOCUMENTS, CLIENTS)


class AppState:
    """
    UI state of one session. Kept as a single object in st.session_state;
    views read it and call its methods instead of touching globals.
    """

    def __init__(self):
        self.view = DASHBOARD
        self.editor = None
        self.pending_delete_id = None
        self.editing_client = None
        self.messages = [ai_engine.welcome_message()]
        self.chat_context_id = None

    # --- NAVIGATION ---
    @property
    def selected_order_id(self):
        """Id of the saved order open in the editor; None on lists and new drafts."""
        if self.editor is None or self.editor.is_new:
            return None
        return self.editor.draft.id

    def navigate(self, view):
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view}")
        self.view = view
        self.editor = None
        self.pending_delete_id = None
        self.editing_client = None

    def open_new_order(self, acting_user):
        self.editor = OrderEditor.new(acting_user)
        self.view = ORDER

    def open_order(self, order, acting_user):
        self.editor = OrderEditor.edit(order, acting_user)
        self.view = ORDER

    def back_to_list(self):
        self.navigate(DASHBOARD)

    def save_order(self, repository):
        """Raises ValidationError and stays on the editor when the draft is invalid."""
        saved = self.editor.save(repository)
        self.back_to_list()
        return saved

    # --- DELETE CONFIRMATION ---
    def request_delete(self, order_id):
        self.pending_delete_id = order_id

    def cancel_delete(self):
        self.pending_delete_id = None

    def confirm_delete(self, repository):
        order_id = self.pending_delete_id
        if order_id is None:
            return
        repository.delete(order_id)
        self.pending_delete_id = None
        if self.editor is not None and self.editor.draft.id == order_id:
            self.back_to_list()

    # --- CHAT ---
    def add_message(self, role, text):
        msg = ChatMessage(id=new_id(), role=role, text=text)
        self.messages.append(msg)
        return msg

    def sync_chat_context(self, order):
        """Adds the context hint once each time a different order gets selected."""
        if order is None:
            self.chat_context_id = None
            return
        if order.id == self.chat_context_id:
            return
        self.chat_context_id = order.id
        self.messages.append(ai_engine.context_message(order))
