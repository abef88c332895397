class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    LOGIN_FORM = "ui.login.form"
    LOGIN_ROLL_NUMBER = "ui.login.roll_number"
    LOGIN_NAME = "ui.login.name"
    LOGOUT_BUTTON = "ui.logout"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    USER = "auth.user"
    FORM_RESPONSE = "data.form_response"
    PENDING_EVENT = "wizard.pending_event"
