"""
Authentication UI components: email entry and OTP verification.
"""

import streamlit as st

from ..container import Container
from ..services.errors import KitchenTrackerError
from ..services.session_controller import LoginStep, SessionController
from ..services.validators import is_valid_email, sanitize_otp_input
from .notifications import notify_success, show_error


class AuthComponents:
    """Authentication-related UI components."""

    @staticmethod
    def login_page(container: Container) -> None:
        """Email step: request a one-time passcode."""
        controller = container.get_session_controller()
        domain = container.settings.session.allowed_email_domain

        st.title("Welcome to Expense Tracker App")
        st.caption("Sign in to manage your kitchen expenses")

        with st.form("login_form"):
            st.subheader("📧 Sign In")
            email = st.text_input("Email", placeholder=f"you@{domain}")
            st.caption(f"Enter your @{domain} address to receive a verification code")
            submitted = st.form_submit_button("Send OTP", type="primary")

        if submitted:
            if not is_valid_email(email.strip(), domain):
                st.error(f"Please enter a valid address (@{domain})")
                return
            try:
                controller.request_otp(email)
            except KitchenTrackerError as e:
                show_error(container.get_error_handler(), e, "send OTP")
                return
            notify_success("Please check your email for the verification code", "OTP Sent")
            st.rerun()

    @staticmethod
    def otp_page(container: Container) -> None:
        """Code step: verify, resend or go back."""
        controller = container.get_session_controller()

        st.title("Verify Your Email")
        st.markdown(f"We've sent a 6-digit code to **{controller.pending_email}**")

        with st.form("otp_form"):
            raw_code = st.text_input("Verification code", max_chars=6, placeholder="000000")
            verify = st.form_submit_button("Verify & Continue", type="primary")

        if verify:
            try:
                controller.verify_otp(sanitize_otp_input(raw_code))
            except KitchenTrackerError as e:
                show_error(container.get_error_handler(), e, "verify OTP")
                return
            container.reset_dashboard()
            notify_success("Login successful! Welcome to your dashboard")
            st.rerun()

        col1, col2 = st.columns(2)
        with col1:
            remaining = controller.cooldown.remaining
            label = f"Resend code in {remaining}s" if remaining else "Resend code"
            if st.button(label, disabled=remaining > 0):
                try:
                    controller.resend_otp()
                except KitchenTrackerError as e:
                    show_error(container.get_error_handler(), e, "resend OTP")
                    return
                notify_success("A new verification code has been sent to your email", "OTP Resent")
                st.rerun()
        with col2:
            if st.button("← Use a different email"):
                controller.back_to_email()
                st.rerun()

    @staticmethod
    def require_authentication(container: Container) -> bool:
        """Render the login flow unless a session exists."""
        controller: SessionController = container.get_session_controller()
        if controller.is_loading:
            with st.spinner("Loading..."):
                controller.start()

        if controller.is_logged_in:
            return True

        if controller.step == LoginStep.AWAITING_CODE:
            AuthComponents.otp_page(container)
        else:
            AuthComponents.login_page(container)
        return False

    @staticmethod
    def logout(container: Container) -> None:
        container.get_session_controller().logout()
        container.reset_dashboard()
        notify_success("You have been successfully logged out", "Logged Out")
        st.rerun()
