import logging

from django.contrib import messages
from django.shortcuts import redirect, render

from marketplace.decorators import session_required
from marketplace.exceptions import AuthFailed, MarketplaceError, Unauthenticated
from marketplace.forms import EmailUpdateForm, PasswordUpdateForm
from marketplace.services.profile import ProfileService
from marketplace.views.helpers import _auth_redirect, _first_form_error

logger = logging.getLogger(__name__)


@session_required("Please login to access your profile")
def profile(request):
    store = request.session_store
    service = ProfileService(store)
    user = store.user

    if request.method != "POST":
        try:
            user = service.fetch_profile()
        except (AuthFailed, Unauthenticated) as e:
            return _auth_redirect(request, e)
        except MarketplaceError as e:
            logger.warning("Profile refresh failed, showing cached user: %s", e)

    email_form = EmailUpdateForm(initial={"email": user.get("email", "")})
    password_form = PasswordUpdateForm()

    if request.method == "POST":
        action = request.POST.get("action")

        if action == "email":
            email_form = EmailUpdateForm(request.POST)
            if email_form.is_valid():
                try:
                    service.update_email(email_form.cleaned_data["email"])
                except (AuthFailed, Unauthenticated) as e:
                    return _auth_redirect(request, e)
                except MarketplaceError as e:
                    messages.error(request, e.message)
                else:
                    messages.success(request, "Email updated successfully!")
                    return redirect("profile")
            else:
                messages.error(request, _first_form_error(email_form))

        elif action == "password":
            password_form = PasswordUpdateForm(request.POST)
            if password_form.is_valid():
                try:
                    service.update_password(password_form.cleaned_data["password"])
                except (AuthFailed, Unauthenticated) as e:
                    return _auth_redirect(request, e)
                except MarketplaceError as e:
                    messages.error(request, e.message)
                else:
                    messages.success(request, "Password updated successfully!")
                    return redirect("profile")
            else:
                messages.error(request, _first_form_error(password_form))

    return render(request, "profile.html", {
        "email_form": email_form,
        "password_form": password_form,
        "profile": user,
    })
