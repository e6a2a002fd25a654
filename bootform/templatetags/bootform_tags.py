"""Bootstrap form components: input, textarea, checkbox, submit, form_group."""

from django import template

from bootform.fields import (
    checkbox_field,
    form_group,
    input_field,
    submit_button,
    textarea_field,
)

register = template.Library()


@register.simple_tag(name="input")
def input_tag(form, field, label=None, **options):
    """Render a form field with label, input and error message.

    Usage:
        {% input form "email" "Your email" type="email" %}
        {% input form "country" "Country" options=countries %}
        {% input form "name" placeholder="Jane" data_role="name" %}

    Args:
        form: A Django form instance
        field: Field name
        label: Label text (omit for no label)
        **options: type, options, label_class; anything else is an HTML
            attribute of the input (underscores -> hyphens)
    """
    return input_field(form, field, label, **options)


@register.simple_tag(name="textarea")
def textarea_tag(form, field, label=None, **options):
    """Render a textarea field.

    Usage:
        {% textarea form "bio" "About you" rows=3 %}
    """
    return textarea_field(form, field, label, **options)


@register.simple_tag(name="checkbox")
def checkbox_tag(form, field, label=None, **attrs):
    """Render a checkbox wrapped in its label.

    Usage:
        {% checkbox form "accept" "I agree" %}
    """
    return checkbox_field(form, field, label, **attrs)


@register.simple_tag(name="submit")
def submit_tag(label):
    """Usage: {% submit "Save" %}"""
    return submit_button(label)


@register.tag(name="form_group")
def do_form_group(parser, token):
    """Wrap custom markup in a form-group div that shows the field's error state.

    Usage:
        {% form_group form "avatar" %}
            <input type="file" name="avatar">
        {% endform_group %}
    """
    bits = token.split_contents()
    if len(bits) != 3:
        raise template.TemplateSyntaxError(f"'{bits[0]}' tag takes a form and a field name")
    nodelist = parser.parse(("endform_group",))
    parser.delete_first_token()
    return FormGroupNode(parser.compile_filter(bits[1]), parser.compile_filter(bits[2]), nodelist)


class FormGroupNode(template.Node):
    def __init__(self, form, field, nodelist):
        self.form = form
        self.field = field
        self.nodelist = nodelist

    def render(self, context):
        form = self.form.resolve(context)
        field = self.field.resolve(context)
        return form_group(form, field, self.nodelist.render(context))
