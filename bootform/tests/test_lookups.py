"""Tests for field id, name and error lookups."""

from django.test import SimpleTestCase, tag

from bootform.attributes import field_id, field_name
from bootform.errors import get_error, has_error
from bootform.test_utils import SignupForm, bound_form


@tag("forms")
class FieldAttributeTests(SimpleTestCase):
    def test_default_id_and_name(self):
        form = SignupForm()
        self.assertEqual(field_id(form, "email"), "id_email")
        self.assertEqual(field_name(form, "email"), "email")

    def test_prefixed_form(self):
        form = SignupForm(prefix="signup")
        self.assertEqual(field_id(form, "email"), "id_signup-email")
        self.assertEqual(field_name(form, "email"), "signup-email")

    def test_custom_auto_id(self):
        form = SignupForm(auto_id="signup_%s")
        self.assertEqual(field_id(form, "email"), "signup_email")

    def test_no_auto_id_falls_back_to_name(self):
        form = SignupForm(auto_id=False, prefix="signup")
        self.assertEqual(field_id(form, "email"), "signup-email")

    def test_unknown_field(self):
        with self.assertRaises(KeyError):
            field_id(SignupForm(), "nope")


@tag("forms")
class FieldErrorTests(SimpleTestCase):
    def test_no_error(self):
        form = bound_form()
        self.assertFalse(has_error(form, "email"))
        self.assertIsNone(get_error(form, "email"))

    def test_error(self):
        form = bound_form(email="")
        self.assertTrue(has_error(form, "email"))
        self.assertEqual(get_error(form, "email"), "This field is required.")

    def test_first_error_only(self):
        form = bound_form()
        form.add_error("name", "First problem.")
        form.add_error("name", "Second problem.")
        self.assertEqual(get_error(form, "name"), "First problem.")

    def test_unbound_form(self):
        self.assertFalse(has_error(SignupForm(), "email"))
