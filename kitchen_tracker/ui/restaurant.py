"""
Restaurant name header with inline editing.
"""

from typing import Optional

import streamlit as st

from ..container import Container
from ..services.errors import AuthError, KitchenTrackerError
from ..services.validators import validate_restaurant_name
from .notifications import notify_success, show_error

_NAME_KEY = "restaurant_name"
_EDITING_KEY = "restaurant_name_editing"
_FAILED_KEY = "restaurant_name_load_failed"


def _load_name(container: Container) -> Optional[str]:
    """Fetch the name once; a failed fetch waits for Refresh or a new login."""
    if _NAME_KEY in st.session_state:
        return st.session_state[_NAME_KEY]
    if st.session_state.get(_FAILED_KEY):
        return None
    try:
        profile = container.get_auth_client().get_restaurant_profile()
    except AuthError as e:
        st.session_state[_FAILED_KEY] = True
        container.get_session_controller().expire_session()
        show_error(container.get_error_handler(), e, "load restaurant name")
        return None
    except KitchenTrackerError as e:
        st.session_state[_FAILED_KEY] = True
        show_error(container.get_error_handler(), e, "load restaurant name")
        return None
    st.session_state[_NAME_KEY] = profile.restaurant_name
    return profile.restaurant_name


def forget_restaurant_name() -> None:
    st.session_state.pop(_NAME_KEY, None)
    st.session_state.pop(_EDITING_KEY, None)
    st.session_state.pop(_FAILED_KEY, None)


def restaurant_name_manager(container: Container) -> None:
    name = _load_name(container)
    editing = st.session_state.get(_EDITING_KEY, False) or not name

    if not editing:
        col1, col2 = st.columns([6, 1])
        col1.subheader(f"🏪 {name}")
        if col2.button("✏️", help="Edit restaurant name"):
            st.session_state[_EDITING_KEY] = True
            st.rerun()
        return

    with st.form("restaurant_name_form"):
        new_name = st.text_input("Restaurant name", value=name or "", placeholder="Enter restaurant name")
        saved = st.form_submit_button("Save")

    if saved:
        try:
            cleaned = validate_restaurant_name(new_name)
            container.get_auth_client().set_restaurant_profile(cleaned)
        except AuthError as e:
            container.get_session_controller().expire_session()
            show_error(container.get_error_handler(), e, "update restaurant name")
            return
        except KitchenTrackerError as e:
            show_error(container.get_error_handler(), e, "update restaurant name")
            return
        st.session_state[_NAME_KEY] = cleaned
        st.session_state[_EDITING_KEY] = False
        notify_success("Restaurant name updated successfully!")
        st.rerun()
