"""Who is using the storefront client."""


class AuthContext:
    """Local sign-in state.

    The server trusts its own session cookie; this context only decides what
    the client offers (checkout form, admin screens).
    """

    def __init__(self):
        self.user_id: str | None = None
        self.is_signed_in = False
        self.is_admin = False

    def sign_in_as_user(self, user_id):
        self.user_id = user_id
        self.is_signed_in = True
        self.is_admin = False

    def sign_in_as_admin(self, user_id):
        self.user_id = user_id
        self.is_signed_in = True
        self.is_admin = True

    def sign_out(self):
        self.user_id = None
        self.is_signed_in = False
        self.is_admin = False
