from django.contrib import messages
from django.shortcuts import redirect, render

from marketplace.exceptions import AuthFailed
from marketplace.forms import LoginForm, RegisterForm
from marketplace.views.helpers import _safe_next


def _render_auth_page(request, login_form=None, register_form=None, tab="login", status=200):
    return render(request, "login.html", {
        "login_form": login_form or LoginForm(),
        "register_form": register_form or RegisterForm(),
        "tab": tab,
        "next": request.POST.get("next") or request.GET.get("next", ""),
    }, status=status)


def user_login(request):
    store = request.session_store
    if store.is_authenticated:
        return redirect("catalog")

    if request.method != "POST":
        return _render_auth_page(request)

    form = LoginForm(request.POST)
    if not form.is_valid():
        return _render_auth_page(request, login_form=form, status=400)

    try:
        store.login(form.cleaned_data["email"].strip(), form.cleaned_data["password"])
    except AuthFailed as e:
        messages.error(request, e.message)
        return _render_auth_page(request, login_form=form, status=400)

    messages.success(request, "Welcome back!")
    return redirect(_safe_next(request, "catalog"))


def register(request):
    store = request.session_store
    if store.is_authenticated:
        return redirect("catalog")

    if request.method != "POST":
        return _render_auth_page(request, tab="register")

    form = RegisterForm(request.POST)
    if not form.is_valid():
        return _render_auth_page(request, register_form=form, tab="register", status=400)

    try:
        store.register(form.cleaned_data["email"], form.cleaned_data["password"])
    except AuthFailed as e:
        messages.error(request, e.message)
        return _render_auth_page(request, register_form=form, tab="register", status=400)

    messages.success(request, "Account created successfully!")
    return redirect("catalog")


def user_logout(request):
    request.session_store.logout()
    messages.success(request, "Logged out successfully")
    return redirect("home")
