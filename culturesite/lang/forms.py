from flask_wtf import FlaskForm
from wtforms import HiddenField, StringField, SubmitField
from wtforms.validators import Length, Optional, Regexp

from ..localization.culture import TAG_PATTERN


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class LanguageForm(FlaskForm):
    lang = StringField(
        "Language",
        filters=[_strip],
        validators=[
            Optional(),
            Length(max=35),
            Regexp(TAG_PATTERN, message="Enter a language tag such as fr-FR."),
        ],
    )
    return_url = HiddenField(
        "Return URL",
        filters=[_strip],
        validators=[Optional(), Length(max=2048)],
    )
    submit = SubmitField("Change")
