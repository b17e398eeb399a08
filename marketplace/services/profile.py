# marketplace/services/profile.py
from marketplace.api_client import read_json
from marketplace.exceptions import ValidationError
from marketplace.services.base import ResourceService
from marketplace.session import normalize_user
from marketplace.validators import validate_email, validate_password


class ProfileService(ResourceService):
    """
    Email/password changes for the signed-in user.
    Not every deployment of the data service implements ``PUT /users/me``;
    a 404/405 there is reported as "not available".
    """

    def fetch_profile(self):
        with self._call():
            token = self._token()
            response = self.client.check(
                self.client.get("/users/me", token=token),
                mutation=True,
                fallback="Failed to load profile",
            )
            data = read_json(response)
            return normalize_user(data) if isinstance(data, dict) else dict(self.session_store.user)

    def update_email(self, email):
        with self._call():
            token = self._token()
            email = validate_email(email)

            response = self.client.check(
                self.client.put("/users/me", json={"email": email}, token=token),
                unavailable="Email update is not available. Please contact support.",
                mutation=True,
                fallback="Failed to update email",
            )
            data = read_json(response)
            if isinstance(data, dict) and data.get("email"):
                email = data["email"]
            return self.session_store.update_user({"email": email})

    def update_password(self, password):
        with self._call():
            token = self._token()
            errors = validate_password(password)
            if errors:
                raise ValidationError(errors)

            self.client.check(
                self.client.put("/users/me", json={"password": password}, token=token),
                unavailable="Password update is not available. Please contact support.",
                mutation=True,
                fallback="Failed to update password",
            )
            return True
