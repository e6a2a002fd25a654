"""Bootstrap 4 field renderers: input, textarea, checkbox, submit, form_group.

Each renderer takes a Django form and a field name and returns a safe markup
fragment::

    input_field(form, "email", "Your email", type="email")

renders (with a "This field is required." error on ``email``)::

    <div class="form-group has-danger" data-feedback-for="id_email">
      <label class="form-control-label" for="id_email">Your email</label>
      <input type="email" name="email" id="id_email" class="form-control is-invalid" ...>
      <small class="invalid-feedback" data-feedback-for="id_email">This field is required.</small>
    </div>
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from django import forms
from django.utils.safestring import SafeString

from bootform.attributes import field_id
from bootform.conf import BootformConfig, get_config
from bootform.errors import get_error, has_error
from bootform.html import content_tag, join_html, merge_attrs, normalize_attrs

logger = logging.getLogger(__name__)

WRAPPER_CLASS = "form-group"
WRAPPER_CHECKBOX_CLASS = "form-check"
ERROR_CLASS = "has-danger"
INPUT_CLASS = "form-control"
INPUT_ERROR_CLASS = "is-invalid"
CHECKBOX_LABEL_CLASS = "form-check-label"
CHECKBOX_INPUT_CLASS = "form-check-input"
ERROR_MESSAGE_CLASS = "invalid-feedback"
SUBMIT_CLASS = "btn btn-primary"

# Options consumed by input_field; everything else becomes an HTML attribute
HANDLED_OPTIONS = ("type", "label_class", "options")


class InputKind(Enum):
    """The input controls input_field knows how to render."""

    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    TEXTAREA = "textarea"
    NUMBER = "number"
    SELECT = "select"

    @classmethod
    def resolve(cls, type_: Any = None, options: Any = None) -> InputKind:
        """Pick the kind for a ``type`` option.

        Any ``options`` (even an empty list) force a select. A missing or
        unrecognized type renders a text input.
        """
        if options is not None:
            return cls.SELECT
        if type_ is None:
            return cls.TEXT
        if isinstance(type_, cls):
            return type_
        try:
            return cls(str(type_).lower())
        except ValueError:
            logger.debug("Unknown input type %r, rendering a text input", type_)
            return cls.TEXT


# Widgets for every kind except SELECT, which needs its choices
WIDGETS: dict[InputKind, type[forms.Widget]] = {
    InputKind.TEXT: forms.TextInput,
    InputKind.EMAIL: forms.EmailInput,
    InputKind.PASSWORD: forms.PasswordInput,
    InputKind.TEXTAREA: forms.Textarea,
    InputKind.NUMBER: forms.NumberInput,
}


def _normalize_choices(options: Iterable[Any] | Mapping[Any, Any]) -> list[tuple[Any, Any]]:
    """Accept ``(value, label)`` pairs, a mapping, or plain values."""
    if isinstance(options, Mapping):
        return list(options.items())
    choices = []
    for option in options:
        if isinstance(option, list | tuple) and len(option) == 2:
            choices.append((option[0], option[1]))
        else:
            choices.append((option, option))
    return choices


def _build_widget(kind: InputKind, options: Any = None) -> forms.Widget:
    if kind is InputKind.SELECT:
        return forms.Select(choices=_normalize_choices(options or []))
    return WIDGETS[kind]()


def _has_label(label: Any) -> bool:
    """``None`` and ``False`` both mean "no label"; the empty string is a label."""
    return label is not None and label is not False


def _group_class(base: str, form: forms.BaseForm, field: str) -> str:
    if has_error(form, field):
        return f"{base} {ERROR_CLASS}"
    return base


def input_field(
    form: forms.BaseForm,
    field: str,
    label: str | None = None,
    *,
    config: BootformConfig | None = None,
    **options: Any,
) -> SafeString:
    """Render a field with its label and error inside a ``form-group`` div.

    Args:
        form: A Django form instance
        field: Name of the field on ``form``
        label: Label text; ``None`` or ``False`` renders no label
        config: Rendering settings (defaults to ``settings.BOOTFORM``)
        **options: ``type`` (email, password, textarea, number, select, text),
            ``options`` (choices; forces a select), ``label_class``. Any other
            key becomes an attribute of the input, underscores -> hyphens.
            ``id`` and ``class`` given here replace the computed ones.
    """
    config = config or get_config()
    id_ = field_id(form, field)

    choices = options.get("options")
    kind = InputKind.resolve(options.get("type"), choices)
    label_class = options.get("label_class")

    input_class = INPUT_CLASS
    if has_error(form, field):
        input_class = f"{INPUT_CLASS} {INPUT_ERROR_CLASS}"

    bound_field = form[field]
    widget = _build_widget(kind, choices)

    # Constraints declared on the form field (maxlength, min, step, ...)
    field_attrs = {**bound_field.field.widget.attrs, **bound_field.field.widget_attrs(widget)}
    passthrough = {key: value for key, value in options.items() if key not in HANDLED_OPTIONS}
    attrs = merge_attrs(
        normalize_attrs(passthrough),
        merge_attrs({"id": id_, "class": input_class, config.feedback_attribute: id_}, field_attrs),
    )

    inner = bound_field.as_widget(widget=widget, attrs=attrs)
    return _wrap(form, field, label, inner, label_class=label_class, config=config)


def textarea_field(
    form: forms.BaseForm,
    field: str,
    label: str | None = None,
    *,
    config: BootformConfig | None = None,
    **options: Any,
) -> SafeString:
    """Render a textarea; same arguments as input_field, ``type`` is ignored."""
    options["type"] = InputKind.TEXTAREA
    return input_field(form, field, label, config=config, **options)


def checkbox_field(
    form: forms.BaseForm,
    field: str,
    label: str | None = None,
    *,
    config: BootformConfig | None = None,
    **attrs: Any,
) -> SafeString:
    """Render a checkbox inside its label, Bootstrap ``form-check`` style.

    Errors only add ``has-danger`` to the wrapper; no message is rendered.
    All keyword arguments become attributes of the checkbox input.
    """
    config = config or get_config()
    id_ = field_id(form, field)

    checkbox = form[field].as_widget(
        widget=forms.CheckboxInput(),
        attrs=merge_attrs(normalize_attrs(attrs), {"class": CHECKBOX_INPUT_CLASS, "id": id_}),
    )
    return content_tag(
        "div",
        content_tag(
            "label",
            join_html(checkbox, label if _has_label(label) else None),
            {"class": CHECKBOX_LABEL_CLASS},
        ),
        {"class": _group_class(WRAPPER_CHECKBOX_CLASS, form, field), config.feedback_attribute: id_},
    )


def submit_button(label: str) -> SafeString:
    """Render a primary submit button in a ``form-group`` div."""
    button = content_tag("button", label, {"type": "submit", "class": SUBMIT_CLASS})
    return content_tag("div", button, {"class": WRAPPER_CLASS})


def form_group(form: forms.BaseForm, field: str, block: Any) -> SafeString:
    """Wrap custom field markup in a ``form-group`` div that reflects errors.

    Safe markup in ``block`` is kept verbatim; plain strings are escaped.
    """
    return content_tag("div", block, {"class": _group_class(WRAPPER_CLASS, form, field)})


def _wrap(
    form: forms.BaseForm,
    field: str,
    label: str | None,
    inner: Any,
    *,
    label_class: str | None = None,
    config: BootformConfig,
) -> SafeString:
    """Surround ``inner`` with the wrapper div, optional label and error."""
    id_ = field_id(form, field)
    error = get_error(form, field)

    if error is not None:
        wrapper_attrs = {"class": f"{WRAPPER_CLASS} {ERROR_CLASS}", config.feedback_attribute: id_}
        help_html = content_tag(
            config.error_content_tag,
            error,
            {"class": ERROR_MESSAGE_CLASS, config.feedback_attribute: id_},
        )
    else:
        wrapper_attrs = {"class": WRAPPER_CLASS}
        help_html = ""

    label_html = ""
    if _has_label(label):
        label_html = content_tag(
            "label", label, {"class": label_class or config.label_class, "for": id_}
        )

    return content_tag("div", join_html(label_html, inner, help_html), wrapper_attrs)
