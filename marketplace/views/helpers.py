from django.contrib import messages
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme

from marketplace.exceptions import AuthFailed, Unauthenticated


def _safe_next(request, default):
    """``next`` from POST/GET if it points back at this site, else ``default``."""
    next_url = (request.POST.get("next") or request.GET.get("next") or "").strip()
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return next_url
    return default


def _is_owner(store, record):
    return bool(store.is_authenticated and record and store.user_id == record.get("ownerId"))


def _auth_redirect(request, exc):
    """
    Token rejected or missing: drop the local session and go to login.
    The stale user must go, otherwise /login/ bounces straight back.
    """
    messages.error(request, exc.message)
    if isinstance(exc, AuthFailed):
        request.session_store.clear()
    return redirect("login")


def _handle_error(request, exc, *fallback_args, **fallback_kwargs):
    if isinstance(exc, (AuthFailed, Unauthenticated)):
        return _auth_redirect(request, exc)
    messages.error(request, exc.message)
    return redirect(*fallback_args, **fallback_kwargs)


def _first_form_error(form):
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return "Please correct the errors below."
