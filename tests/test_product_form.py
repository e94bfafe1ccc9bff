from catalog.extensions import db
from catalog.models import Product


def _count(app):
    with app.app_context():
        return db.session.execute(db.select(db.func.count(Product.id))).scalar_one()


def test_form_page_renders_inputs(client):
    resp = client.get("/product/create")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert 'name="name"' in html
    assert 'name="price"' in html
    assert "Add Product" in html


def test_landing_page_links_to_form(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "/product/create" in resp.get_data(as_text=True)


def test_submitting_form_creates_product_and_redirects(app, client):
    resp = client.post("/product/store", data={"name": "Desk Lamp", "price": "45"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/product/create")
    with app.app_context():
        product = db.session.execute(db.select(Product)).scalar_one()
        assert product.name == "Desk Lamp"
        assert product.price == 45


def test_success_message_is_shown_once(client):
    resp = client.post("/product/store", data={"name": "Mug", "price": "12"}, follow_redirects=True)

    assert resp.status_code == 200
    assert "Product Added" in resp.get_data(as_text=True)

    again = client.get("/product/create")
    assert "Product Added" not in again.get_data(as_text=True)


def test_missing_name_redirects_back_with_error(app, client):
    resp = client.post("/product/store", data={"price": "10"}, follow_redirects=True)

    html = resp.get_data(as_text=True)
    assert resp.request.path == "/product/create"
    assert "The name field is required." in html
    assert "Product Added" not in html
    assert _count(app) == 0


def test_non_integer_price_is_rejected(app, client):
    resp = client.post("/product/store", data={"name": "Chair", "price": "ten"}, follow_redirects=True)

    html = resp.get_data(as_text=True)
    assert "The price field must be an integer." in html
    assert _count(app) == 0


def test_blank_price_is_reported_as_missing(app, client):
    resp = client.post("/product/store", data={"name": "Chair", "price": "  "}, follow_redirects=True)

    assert "The price field is required." in resp.get_data(as_text=True)
    assert _count(app) == 0


def test_zero_price_is_accepted(app, client):
    client.post("/product/store", data={"name": "Freebie", "price": "0"})
    assert _count(app) == 1


def test_failed_submission_keeps_old_input_for_one_request(client):
    client.post("/product/store", data={"name": "Sofa", "price": "abc"})

    html = client.get("/product/create").get_data(as_text=True)
    assert 'value="Sofa"' in html
    assert 'value="abc"' in html

    html = client.get("/product/create").get_data(as_text=True)
    assert 'value="Sofa"' not in html


def test_form_requires_csrf_token_when_enabled(app):
    app.config["WTF_CSRF_ENABLED"] = True
    client = app.test_client()

    resp = client.post("/product/store", data={"name": "Lamp", "price": "5"})

    assert resp.status_code == 400
    assert _count(app) == 0


def test_form_renders_csrf_token_when_enabled(app):
    app.config["WTF_CSRF_ENABLED"] = True
    client = app.test_client()

    html = client.get("/product/create").get_data(as_text=True)

    assert 'name="csrf_token"' in html


def test_out_of_range_price_is_rejected(app, client):
    resp = client.post(
        "/product/store", data={"name": "Big", "price": "99999999999999999999"}, follow_redirects=True
    )

    assert resp.status_code == 200
    assert "The price field must be an integer." in resp.get_data(as_text=True)
    assert _count(app) == 0


def test_underscore_grouped_price_is_rejected(app, client):
    resp = client.post("/product/store", data={"name": "Grouped", "price": "1_000"}, follow_redirects=True)

    assert "The price field must be an integer." in resp.get_data(as_text=True)
    assert _count(app) == 0


def test_signed_price_is_accepted(app, client):
    client.post("/product/store", data={"name": "Credit", "price": "-25"})

    with app.app_context():
        assert db.session.execute(db.select(Product.price)).scalar_one() == -25
