import logging

from flask import Blueprint, flash, redirect, render_template, session, url_for

from ..forms import ProductForm
from ..store import store

logger = logging.getLogger(__name__)

web_bp = Blueprint("web", __name__)

OLD_INPUT_KEY = "_old_input"


@web_bp.route("/", methods=["GET"])
def index():
    return render_template("welcome.html")


@web_bp.route("/product/create", methods=["GET"])
def create_product():
    old = session.pop(OLD_INPUT_KEY, None) or {}
    return render_template("product_form.html", form=ProductForm(), old=old)


@web_bp.route("/product/store", methods=["POST"])
def store_product():
    form = ProductForm()
    if not form.validate_on_submit():
        for messages in form.errors.values():
            for message in messages:
                flash(message, "error")
        # submitted values survive exactly one redirect, like the flash messages
        session[OLD_INPUT_KEY] = {
            "name": form.name.raw_data[0] if form.name.raw_data else "",
            "price": form.price.raw_data[0] if form.price.raw_data else "",
        }
        logger.info("Rejected product form: %s", form.errors)
        return redirect(url_for("web.create_product"))

    store.create(name=form.name.data, price=form.price.data)
    flash("Product Added", "success")
    return redirect(url_for("web.create_product"))
