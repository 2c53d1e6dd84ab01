"""Tests for carrier response normalisation."""

from fulfillment.quotes.normalize import normalize_quote, normalize_quotes


class TestNormalizeQuote:
    def test_bigpost_shape(self):
        quote = normalize_quote(
            {
                "ServiceCode": "RE",
                "ServiceName": "Road Express",
                "CarrierName": "Hunter Express",
                "CarrierId": 17,
                "Total": "48.504",
                "EstimatedDeliveryDays": "4",
                "AuthorityToLeave": True,
                "Restrictions": ["No PO boxes"],
            }
        )
        assert quote.service == "Road Express"
        assert quote.price == 48.5
        assert quote.delivery_days == 4
        assert quote.carrier == "Hunter Express"
        assert quote.carrier_id == "17"
        assert quote.service_code == "RE"
        assert quote.authority_to_leave is True
        assert quote.restrictions == ("No PO boxes",)
        assert quote.source == "bigpost"

    def test_camel_case_shape(self):
        quote = normalize_quote({"serviceName": "Express", "totalPrice": 30, "deliveryDays": 2, "carrierName": "TNT"})
        assert quote.service == "Express"
        assert quote.price == 30.0
        assert quote.delivery_days == 2
        assert quote.carrier == "TNT"

    def test_missing_fields_use_defaults(self):
        quote = normalize_quote({"price": 20})
        assert quote.service == "Standard Shipping"
        assert quote.delivery_days == 5
        assert quote.carrier == "Carrier"
        assert quote.restrictions == ()

    def test_quote_without_price_is_dropped(self):
        assert normalize_quote({"ServiceName": "Road Express"}) is None

    def test_unparseable_price_is_dropped(self):
        assert normalize_quote({"ServiceName": "Road Express", "Total": "call us"}) is None

    def test_restrictions_as_json_string(self):
        quote = normalize_quote({"Total": 10, "Restrictions": '["Tail lift required"]'})
        assert quote.restrictions == ("Tail lift required",)


class TestNormalizeQuotes:
    def test_sorted_cheapest_first_then_fastest(self):
        quotes = normalize_quotes(
            {
                "Quotes": [
                    {"ServiceName": "Slow", "Total": 40, "EstimatedDeliveryDays": 6},
                    {"ServiceName": "Cheap", "Total": 20, "EstimatedDeliveryDays": 5},
                    {"ServiceName": "Cheap Fast", "Total": 20, "EstimatedDeliveryDays": 2},
                ]
            }
        )
        assert [q.service for q in quotes] == ["Cheap Fast", "Cheap", "Slow"]

    def test_accepts_bare_list(self):
        assert len(normalize_quotes([{"Total": 1}, {"Total": 2}])) == 2

    def test_unusable_entries_are_skipped(self):
        quotes = normalize_quotes({"Quotes": [{"Total": 5}, {"ServiceName": "No price"}, "junk"]})
        assert len(quotes) == 1

    def test_unexpected_response_yields_nothing(self):
        assert normalize_quotes(None) == []
        assert normalize_quotes({"Success": False, "ErrorMessage": "No services"}) == []
