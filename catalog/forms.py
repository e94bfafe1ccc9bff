from flask_wtf import FlaskForm
from wtforms import IntegerField, StringField
from wtforms.validators import DataRequired, StopValidation

from .schemas import MUST_BE_INTEGER, REQUIRED, parse_integer


def value_present(form, field):
    # blank input leaves data as None without a conversion error
    if field.data is None and not field.errors:
        raise StopValidation(REQUIRED.format(field=field.name))


class PriceField(IntegerField):
    """Integer input where blank means missing and anything else must parse."""

    def process_formdata(self, valuelist):
        self.data = None
        if not valuelist or not valuelist[0].strip():
            return
        value = parse_integer(valuelist[0])
        if value is None:
            raise ValueError(MUST_BE_INTEGER.format(field=self.name))
        self.data = value


class ProductForm(FlaskForm):
    name = StringField(
        "Product Name",
        validators=[DataRequired(message=REQUIRED.format(field="name"))],
        filters=[lambda x: x.strip() if isinstance(x, str) else x],
    )
    price = PriceField("Price", validators=[value_present])
