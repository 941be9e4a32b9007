"""Tests for SessionController"""
from decimal import Decimal

from farmerhub.errors import AuthError, ValidationReason
from farmerhub.session import SessionState


class TestLoginLogout:
    """State transitions"""

    def test_initial_state(self, controller):
        assert controller.state == SessionState.LOGGED_OUT
        assert controller.profile() is None

    def test_login_success(self, controller):
        result = controller.login("FARMER", "Pass123!")

        assert result.success
        assert controller.state == SessionState.LOGGED_IN
        assert controller.is_logged_in
        assert controller.profile().email == "farm@hub.com"

    def test_login_failure_keeps_state(self, controller):
        result = controller.login("farmer", "wrong")

        assert result.error == AuthError.WRONG_PASSWORD
        assert controller.state == SessionState.LOGGED_OUT
        assert controller.active_account is None

    def test_logout_clears_account_and_cart(self, controller, catalog):
        controller.login("farmer", "Pass123!")
        controller.add_to_cart(catalog.list("Fruits")[0])

        controller.logout()

        assert controller.state == SessionState.LOGGED_OUT
        assert controller.active_account is None
        assert controller.cart_lines() == []
        assert controller.item_count() == 0

    def test_logout_when_logged_out(self, controller):
        controller.logout()
        assert controller.state == SessionState.LOGGED_OUT

    def test_switching_account_clears_previous_cart(self, controller, catalog):
        """Logging in as someone else ends the previous session"""
        controller.register("grower", "Pass123@", "grow.in")
        controller.login("farmer", "Pass123!")
        controller.add_to_cart(catalog.list("Fruits")[0])

        result = controller.login("grower", "Pass123@")

        assert result.success
        assert controller.profile().username == "grower"
        assert controller.cart_lines() == []

    def test_login_again_as_same_account_keeps_cart(self, controller, catalog):
        controller.login("farmer", "Pass123!")
        controller.add_to_cart(catalog.list("Fruits")[0])

        assert controller.login("FARMER", "Pass123!").success
        assert controller.item_count() == 1

    def test_failed_switch_keeps_current_session(self, controller, catalog):
        controller.login("farmer", "Pass123!")
        controller.add_to_cart(catalog.list("Fruits")[0])

        assert not controller.login("nobody", "x").success
        assert controller.profile().username == "farmer"
        assert controller.item_count() == 1


class TestRegister:
    """Registration routing"""

    def test_register_does_not_login(self, controller):
        result = controller.register("Grower", "Pass123@", "grow@farm.in", confirm_password="Pass123@")

        assert result.success
        assert controller.state == SessionState.LOGGED_OUT
        assert controller.prefill_username == "Grower"

    def test_failed_register_leaves_prefill(self, controller):
        result = controller.register("gr", "Pass123@", "grow@farm.in")

        assert result.reason == ValidationReason.USERNAME_TOO_SHORT
        assert controller.prefill_username == ""

    def test_login_after_register(self, controller):
        controller.register("Grower", "Pass123@", "grow@farm.in")
        result = controller.login(controller.prefill_username, "Pass123@")

        assert result.success
        assert controller.prefill_username == ""

    def test_resolve_for_reset(self, controller):
        assert controller.resolve_for_reset("farm@hub.com").username == "farmer"


class TestCommerce:
    """Catalog and cart through the controller"""

    def test_list_product_requires_login(self, controller, catalog):
        result = controller.list_product("Mangoes", "Alphonso.", "Fruits", "300")

        assert result.success is False
        assert result.reason == ValidationReason.NOT_LOGGED_IN
        assert len(catalog) == 6

    def test_list_product_attributed_to_active_account(self, controller):
        controller.login("farmer", "Pass123!")
        result = controller.list_product("Mangoes", "Alphonso.", "Fruits", "300")

        assert result.success
        assert result.product.listed_by == "farmer"
        assert controller.list_products("Fruits")[-1].name == "Mangoes"

    def test_cart_flow(self, controller):
        controller.login("farmer", "Pass123!")
        apples = controller.list_products("Fruits")[0]
        rice = controller.list_products("Grains")[0]

        controller.add_to_cart(apples)
        controller.add_to_cart(apples)
        controller.add_to_cart(rice)

        assert controller.item_count() == 3
        assert controller.subtotal() == Decimal("1100")
        assert controller.checkout() == Decimal("1100")
        assert controller.cart_lines() == []
        assert controller.state == SessionState.LOGGED_IN

    def test_cart_accepted_while_logged_out(self, controller, sample_product):
        line = controller.add_to_cart(sample_product)
        assert line.quantity == 1
