from billed.containers.bills import to_display_bill
from billed.models.bill import RawBill
from billed.views.modal import HtmlModal
from billed.views.render import bills_ui, error_page, loading_page, new_bill_ui, receipt_preview


class TestBillsUI:
    def test_rows(self, sample_bills, employee):
        bills = [to_display_bill(RawBill.model_validate(b)) for b in sample_bills]
        html = bills_ui(data=bills, user=employee)
        assert html.count('data-testid="icon-eye"') == 4
        assert "400 €" in html
        assert 'id="modaleFile"' in html
        assert 'data-testid="btn-new-bill"' in html

    def test_empty(self, employee):
        html = bills_ui(data=[], user=employee)
        assert 'data-testid="icon-eye"' not in html

    def test_loading(self):
        assert "Loading..." in bills_ui(loading=True)

    def test_error(self):
        html = bills_ui(error="Erreur 404")
        assert "Erreur 404" in html
        assert "Mes notes de frais" not in html

    def test_error_is_escaped(self):
        assert "<script>" not in error_page("<script>alert(1)</script>")

    def test_loading_page(self):
        assert 'id="loading"' in loading_page()


class TestNewBillUI:
    def test_form_fields(self, employee):
        html = new_bill_ui(user=employee)
        for test_id in ["expense-type", "expense-name", "datepicker", "amount", "vat", "pct", "commentary", "file"]:
            assert f'data-testid="{test_id}"' in html
        assert "Restaurants et bars" in html
        assert 'accept=".jpeg,.jpg,.png"' in html
        assert html.count("Envoyer") == 2


class TestReceiptPreview:
    def test_image(self):
        html = receipt_preview("https://localhost:3456/images/test.jpg", 500)
        assert 'src="https://localhost:3456/images/test.jpg"' in html
        assert 'width="500"' in html


class TestHtmlModal:
    def test_show_and_hide(self):
        modal = HtmlModal()
        modal.show("<p>receipt</p>")
        assert modal.visible
        assert modal.body == "<p>receipt</p>"
        modal.hide()
        assert not modal.visible
