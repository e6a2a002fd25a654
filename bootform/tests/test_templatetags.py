"""Tests for the bootform_tags template library."""

from django.template import Context, Template, TemplateSyntaxError
from django.test import SimpleTestCase, tag

from bootform.fields import checkbox_field, input_field, submit_button, textarea_field
from bootform.test_utils import COUNTRY_CHOICES, bound_form


def render(source: str, **context) -> str:
    return Template("{% load bootform_tags %}" + source).render(Context(context))


@tag("forms")
class SimpleTagTests(SimpleTestCase):
    """Simple tags render exactly what the Python renderers return."""

    def test_input_tag(self):
        form = bound_form(email="")
        self.assertEqual(
            render('{% input form "email" "Your email" type="email" %}', form=form),
            input_field(form, "email", "Your email", type="email"),
        )

    def test_input_tag_without_label(self):
        result = render('{% input form "name" %}', form=bound_form())
        self.assertNotIn("<label", result)

    def test_input_tag_attributes(self):
        result = render(
            '{% input form "name" placeholder="Jane" data_role="name" class="wide" %}',
            form=bound_form(),
        )
        self.assertIn('placeholder="Jane"', result)
        self.assertIn('data-role="name"', result)
        self.assertIn('class="wide"', result)

    def test_input_tag_options_variable(self):
        result = render(
            '{% input form "country" "Country" options=countries %}',
            form=bound_form(),
            countries=COUNTRY_CHOICES,
        )
        self.assertIn('<option value="de" selected>Germany</option>', result)

    def test_output_is_not_double_escaped(self):
        result = render('{% input form "name" label %}', form=bound_form(), label="A & B")
        self.assertIn(">A &amp; B</label>", result)
        self.assertNotIn("&amp;amp;", result)
        self.assertNotIn("&lt;div", result)

    def test_textarea_tag(self):
        form = bound_form(bio="Hi")
        self.assertEqual(
            render('{% textarea form "bio" "Bio" rows=3 %}', form=form),
            textarea_field(form, "bio", "Bio", rows=3),
        )

    def test_checkbox_tag(self):
        form = bound_form()
        self.assertEqual(
            render('{% checkbox form "accept" "I agree" %}', form=form),
            checkbox_field(form, "accept", "I agree"),
        )

    def test_submit_tag(self):
        self.assertEqual(render('{% submit "Save" %}'), submit_button("Save"))


@tag("forms")
class FormGroupTagTests(SimpleTestCase):
    """Tests for the {% form_group %} block tag."""

    def test_wraps_body(self):
        result = render(
            '{% form_group form "email" %}<input type="file" name="email">{% endform_group %}',
            form=bound_form(),
        )
        self.assertEqual(result, '<div class="form-group"><input type="file" name="email"></div>')

    def test_error_class(self):
        result = render(
            '{% form_group form "email" %}<b>{{ note }}</b>{% endform_group %}',
            form=bound_form(email=""),
            note="<i>",
        )
        self.assertEqual(result, '<div class="form-group has-danger"><b>&lt;i&gt;</b></div>')

    def test_field_name_from_variable(self):
        result = render(
            "{% form_group form field %}x{% endform_group %}",
            form=bound_form(email=""),
            field="email",
        )
        self.assertIn("has-danger", result)

    def test_requires_form_and_field(self):
        with self.assertRaises(TemplateSyntaxError):
            render("{% form_group form %}x{% endform_group %}", form=bound_form())
