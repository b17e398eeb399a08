from django.contrib import messages
from django.shortcuts import redirect
from django.urls import NoReverseMatch, reverse
from django.utils.http import urlencode
from django.views.decorators.http import require_POST

from marketplace.exceptions import MarketplaceError
from marketplace.forms import CommentForm
from marketplace.services.comments import CommentService
from marketplace.views.helpers import _first_form_error, _handle_error


@require_POST
def post_comment(request, listing_id):
    detail_url = reverse("listing_detail", kwargs={"listing_id": listing_id})
    if not request.session_store.is_authenticated:
        messages.error(request, "Please login to comment")
        return redirect(f"{reverse('login')}?{urlencode({'next': detail_url})}")

    form = CommentForm(request.POST)
    if not form.is_valid():
        messages.error(request, _first_form_error(form))
        return redirect(detail_url)

    try:
        CommentService(request.session_store).create_comment(listing_id, form.cleaned_data["text"])
    except MarketplaceError as e:
        return _handle_error(request, e, detail_url)

    messages.success(request, "Comment posted!")
    return redirect(f"{detail_url}#comments")


@require_POST
def delete_comment(request, comment_id):
    listing_id = request.POST.get("listing_id", "")
    try:
        target = reverse("listing_detail", kwargs={"listing_id": listing_id}) if listing_id else None
    except NoReverseMatch:
        target = None
    if target is None:
        listing_id = ""
        target = reverse("catalog")

    if not request.session_store.is_authenticated:
        messages.error(request, "Please login to delete comments")
        return redirect("login")

    try:
        CommentService(request.session_store).delete_comment(comment_id)
    except MarketplaceError as e:
        return _handle_error(request, e, target)

    messages.success(request, "Comment deleted")
    return redirect(f"{target}#comments" if listing_id else target)
