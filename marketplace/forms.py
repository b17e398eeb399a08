from django import forms
from django.utils.translation import gettext_lazy as _

from marketplace import exceptions
from marketplace.constants import (
    LISTING_CATEGORIES,
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
)
from marketplace.services.images import image_to_data_url
from marketplace.validators import EMAIL_PATTERN, parse_price, validate_password

CATEGORY_CHOICES = [("", _("Select a category"))] + [(c, c) for c in LISTING_CATEGORIES]


class LoginForm(forms.Form):
    email = forms.CharField(
        label=_("Email"),
        widget=forms.EmailInput(attrs={"class": "form-control", "autocomplete": "email"}),
    )
    password = forms.CharField(
        label=_("Password"),
        strip=False,
        widget=forms.PasswordInput(attrs={"class": "form-control", "autocomplete": "current-password"}),
    )


class RegisterForm(forms.Form):
    email = forms.CharField(
        label=_("Email"),
        widget=forms.EmailInput(attrs={"class": "form-control", "autocomplete": "email"}),
    )
    password = forms.CharField(
        label=_("Password"),
        strip=False,
        widget=forms.PasswordInput(attrs={"class": "form-control", "autocomplete": "new-password"}),
    )

    def clean_email(self):
        email = self.cleaned_data.get("email", "").strip()
        if not EMAIL_PATTERN.match(email):
            raise forms.ValidationError(_("Enter a valid email address"))
        return email

    def clean_password(self):
        pwd = self.cleaned_data.get("password", "")
        errors = validate_password(pwd)
        if errors:
            # one at a time, same as the toast
            raise forms.ValidationError(errors[0])
        return pwd


class ListingForm(forms.Form):
    title = forms.CharField(
        label=_("Title"),
        max_length=MAX_TITLE_LENGTH,
        error_messages={"required": _("Title is required. Please enter a title for your listing.")},
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )
    description = forms.CharField(
        label=_("Description"),
        max_length=MAX_DESCRIPTION_LENGTH,
        error_messages={"required": _("Description is required. Please describe your item.")},
        widget=forms.Textarea(attrs={"class": "form-control", "rows": 5}),
    )
    # free text, parsed by clean_price
    price = forms.CharField(
        label=_("Price"),
        error_messages={"required": _("Price is required. Please enter a valid number.")},
        widget=forms.TextInput(attrs={"class": "form-control", "inputmode": "decimal"}),
    )
    category = forms.ChoiceField(
        label=_("Category"),
        choices=CATEGORY_CHOICES,
        error_messages={"required": _("Category is required. Please select a category.")},
        widget=forms.Select(attrs={"class": "form-select"}),
    )
    image_url = forms.CharField(
        label=_("Image URL"),
        required=False,
        widget=forms.URLInput(attrs={"class": "form-control", "placeholder": "https://..."}),
    )
    image = forms.FileField(
        label=_("Or upload an image"),
        required=False,
        widget=forms.ClearableFileInput(attrs={"class": "form-control", "accept": "image/*"}),
    )

    def clean_price(self):
        price, error = parse_price(self.cleaned_data.get("price"))
        if error:
            raise forms.ValidationError(error)
        return price

    def clean_image(self):
        upload = self.cleaned_data.get("image")
        if not upload:
            return None
        try:
            return image_to_data_url(upload)
        except exceptions.ValidationError as e:
            raise forms.ValidationError(e.message)

    def to_listing_data(self):
        """Payload for ListingService.create_listing / update_listing."""
        data = self.cleaned_data
        return {
            "title": data["title"],
            "description": data["description"],
            "price": data["price"],
            "category": data["category"],
            "imageUrl": data.get("image") or data.get("image_url") or "",
        }

    @classmethod
    def initial_from_listing(cls, listing):
        image_url = listing.get("imageUrl") or ""
        return {
            "title": listing.get("title", ""),
            "description": listing.get("description", ""),
            "price": listing.get("price", ""),
            "category": listing.get("category", ""),
            # data URLs are too long to edit by hand; keep them unless replaced
            "image_url": "" if image_url.startswith("data:") else image_url,
        }


class CommentForm(forms.Form):
    text = forms.CharField(
        label=_("Comment"),
        max_length=2000,
        error_messages={"required": _("Comment text is required")},
        widget=forms.Textarea(attrs={"class": "form-control", "rows": 3, "placeholder": _("Write a comment...")}),
    )


class EmailUpdateForm(forms.Form):
    email = forms.CharField(
        label=_("Email"),
        widget=forms.EmailInput(attrs={"class": "form-control"}),
    )


class PasswordUpdateForm(forms.Form):
    password = forms.CharField(
        label=_("New password"),
        strip=False,
        widget=forms.PasswordInput(attrs={"class": "form-control", "autocomplete": "new-password"}),
    )

    def clean_password(self):
        pwd = self.cleaned_data.get("password", "")
        errors = validate_password(pwd)
        if errors:
            raise forms.ValidationError(errors[0])
        return pwd
