# marketplace/decorators.py
from functools import wraps

from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect
from django.utils.http import urlencode


def session_required(message="Please login to continue"):
    """
    Like ``login_required`` but for the remote-service session: anonymous
    visitors get a flash message and go to the login page with ``next``.
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            if not request.session_store.is_authenticated:
                messages.error(request, message)
                return redirect(f"{settings.LOGIN_URL}?{urlencode({'next': request.get_full_path()})}")
            return view_func(request, *args, **kwargs)
        return _wrapped
    return decorator
