"""
End-to-end tests for the form extractors.

Tests cover:
1. Generic parsing (header, basic info, errors)
2. Form 8-K items and impact
3. Forms 3 / 4 ownership documents
4. Form 13F-HR holdings
5. Schedule 13D / 13G cover pages
6. Forms 10-K, S-1, S-4, S-8
"""

import json
import logging

import pytest

from filing_parser.forms.factory import parse_filing
from filing_parser.forms.form_10k import Form10KExtractor
from filing_parser.forms.form_10q import Form10QExtractor
from filing_parser.forms.form_13f import Form13FExtractor
from filing_parser.forms.form_3 import Form3Extractor
from filing_parser.forms.form_4 import Form4Extractor
from filing_parser.forms.form_8k import Form8KExtractor, merge_item_information
from filing_parser.forms.form_s1 import FormS1Extractor
from filing_parser.forms.form_s4 import FormS4Extractor, classify_transaction
from filing_parser.forms.form_s8 import FormS8Extractor, extract_plan_names
from filing_parser.forms.registration import extract_offering_details
from filing_parser.forms.schedule_13d import Schedule13DExtractor, extract_cusip
from filing_parser.forms.schedule_13g import Schedule13GExtractor
from filing_parser.forms.schemas import Form8KData, TransactionDetails
from filing_parser.parse.errors import FormatError
from filing_parser.parse.generic import GenericParsingService
from filing_parser.parse.models import ConsistentDocumentFields


# ─── Test Data ───

URL = "https://www.sec.gov/Archives/edgar/data/320193/0001193125-25-012345.txt"


class TestGenericParsingService:
    """Tests for the form-independent parse."""

    def test_basic_info(self, sample_8k):
        """Header datetimes are normalized to epoch seconds."""
        doc = GenericParsingService().parse(sample_8k, URL)
        assert doc.basic.acceptance_datetime == 1738087548
        assert doc.basic.filed_as_of_date == 1738036800
        assert doc.basic.unix_timestamp == 1738087548
        assert doc.basic.accession_number == "0001193125-25-012345"
        assert doc.basic.submission_type == "8-K"
        assert doc.basic.url == URL

    def test_company_fields(self, sample_8k):
        """Pattern chains fill company name, CIK and ticker."""
        doc = GenericParsingService().parse(sample_8k, URL)
        assert isinstance(doc.parsed, ConsistentDocumentFields)
        assert doc.parsed.company_conformed_name == "Acme Widgets Corp"
        assert doc.parsed.cik == "0000320193"
        assert doc.parsed.ticker == "FAX"

    def test_header_extras_kept(self, sample_8k):
        """Undeclared header keys survive as extra fields."""
        doc = GenericParsingService().parse(sample_8k, URL)
        assert doc.parsed.model_extra["conformedPeriodOfReport"] == "20250127"

    def test_baseline_impact(self, sample_8k):
        """The generic service applies the baseline only."""
        doc = GenericParsingService().parse(sample_8k, URL)
        assert doc.estimated_impact.market_impact == "positive"
        assert doc.estimated_impact.confidence == 0.6

    def test_missing_acceptance_datetime(self, sample_8k):
        text = sample_8k.replace("<ACCEPTANCE-DATETIME>20250128140548\n", "")
        with pytest.raises(FormatError):
            GenericParsingService().parse(text, URL)

    def test_malformed_filing_date(self, sample_8k):
        text = sample_8k.replace("FILED AS OF DATE:\t\t20250128", "FILED AS OF DATE:\t\t2025-01-28")
        with pytest.raises(FormatError):
            GenericParsingService().parse(text, URL)

    def test_misshapen_filer_entry_set_aside(self, sample_8k, caplog):
        """A FILER line with a bare value does not abort the parse."""
        text = sample_8k.replace(
            "DATE AS OF CHANGE:\t\t20250128\n",
            "DATE AS OF CHANGE:\t\t20250128\nFILER:\t\tSomething\n",
        )
        with caplog.at_level(logging.WARNING):
            doc = parse_filing(text, URL, "8-K")

        assert isinstance(doc.parsed, Form8KData)
        assert len(doc.parsed.filer) == 1
        assert doc.parsed.filer[0].company_data.company_conformed_name == "Acme Widgets Corp"
        assert doc.parsed.model_extra["filerRaw"] == ["Something"]
        assert doc.basic.acceptance_datetime == 1738087548
        assert "Form8KData" in caplog.text

    def test_misshapen_scalar_set_aside(self):
        """A scalar field that parsed as a section moves to a raw extra."""
        header = {
            "accessionNumber": {"foo": "bar"},
            "conformedSubmissionType": "8-K",
            "itemInformation": ["Other Events", {"nested": "x"}],
        }
        payload = GenericParsingService(Form8KData).validate_header(header)

        assert payload.accession_number is None
        assert payload.model_extra["accessionNumberRaw"] == {"foo": "bar"}
        assert payload.item_information == ["Other Events"]
        assert payload.model_extra["itemInformationRaw"] == [{"nested": "x"}]
        assert payload.conformed_submission_type == "8-K"

    def test_well_formed_header_untouched(self):
        header = {"accessionNumber": "0001193125-25-012345", "filer": []}
        payload = GenericParsingService(Form8KData).validate_header(header)
        assert payload.accession_number == "0001193125-25-012345"
        assert "filerRaw" not in payload.model_extra

    def test_json_keys_are_camel_case(self, sample_8k):
        data = json.loads(GenericParsingService().parse(sample_8k, URL).to_json())
        assert set(data) == {"basic", "estimatedImpact", "parsed", "attachments"}
        assert "acceptanceDatetime" in data["basic"]
        assert "marketImpact" in data["estimatedImpact"]
        assert data["parsed"]["companyConformedName"] == "Acme Widgets Corp"


class TestForm8K:
    """Tests for Form8KExtractor."""

    def test_end_to_end(self, sample_8k):
        """Other Events makes the filing positive with confidence 0.8."""
        doc = Form8KExtractor().parse(sample_8k, URL)
        assert isinstance(doc.parsed, Form8KData)
        assert doc.estimated_impact.market_impact == "positive"
        assert doc.estimated_impact.confidence == 0.8
        assert doc.parsed.ticker == "FAX"
        assert doc.attachments == []

    def test_item_information(self, sample_8k):
        """Header titles first, then body item codes, no duplicates."""
        doc = Form8KExtractor().parse(sample_8k, URL)
        assert doc.parsed.item_information == [
            "Other Events",
            "Financial Statements and Exhibits",
            "Item 8.01",
            "Item 9.01",
        ]

    def test_filer_block(self, sample_8k):
        doc = Form8KExtractor().parse(sample_8k, URL)
        filer = doc.parsed.filer[0]
        assert filer.company_data.company_conformed_name == "Acme Widgets Corp"
        assert filer.business_address.business_phone == "(408) 996-1010"
        assert filer.business_address.street2 is None
        assert doc.parsed.conformed_period_of_report == "20250127"

    def test_acquisition_item(self, sample_8k):
        """Item 2.01 in the body is a material event."""
        text = (
            sample_8k
            .replace("ITEM INFORMATION:\t\tOther Events\n", "")
            .replace("Item 8.01 Other Events.", "Item 2.01 Completion of Acquisition.")
        )
        doc = Form8KExtractor().parse(text, URL)
        assert "Item 2.01" in doc.parsed.item_information
        assert doc.estimated_impact.confidence >= 0.8

    def test_exhibits_only(self, sample_8k):
        """Non-material items keep the baseline."""
        text = (
            sample_8k
            .replace("ITEM INFORMATION:\t\tOther Events\n", "")
            .replace("Item 8.01 Other Events.", "")
        )
        doc = Form8KExtractor().parse(text, URL)
        assert doc.estimated_impact.confidence == 0.6

    def test_otc_ticker(self, sample_8k):
        """OTC quotations are recognised for 8-Ks."""
        text = sample_8k.replace("(NYSE American: FAX)", "(OTC: ACMW)")
        assert Form8KExtractor().parse(text, URL).parsed.ticker == "ACMW"

    def test_merge_item_information(self):
        assert merge_item_information(["Other Events"], ["8.01", "8.01"]) == ["Other Events", "Item 8.01"]


class TestOwnershipForms:
    """Tests for Form4Extractor and Form3Extractor."""

    def test_form4_transactions(self, sample_form4):
        doc = Form4Extractor().parse(sample_form4, URL)
        ownership = doc.parsed.ownership_document
        assert ownership.issuer.issuer_trading_symbol == "ACME"
        assert ownership.reporting_owner[0].reporting_owner_relationship.is_officer is True
        assert ownership.reporting_owner[0].reporting_owner_relationship.officer_title == "Chief Financial Officer"

        transaction = ownership.non_derivative_table.non_derivative_transaction[0]
        assert transaction.security_title == "Common Stock"
        assert transaction.transaction_coding.transaction_code == "S"
        assert transaction.transaction_amounts.transaction_shares == 1000
        assert transaction.transaction_amounts.transaction_price_per_share == 225.5
        assert transaction.post_transaction_amounts.shares_owned_following_transaction == 50000

    def test_form4_ticker_and_impact(self, sample_form4):
        """Trading symbol comes from the XML; impact stays at baseline."""
        doc = Form4Extractor().parse(sample_form4, URL)
        assert doc.parsed.ticker == "ACME"
        assert doc.estimated_impact.market_impact == "positive"
        assert doc.estimated_impact.confidence == 0.7
        assert len(doc.attachments) == 1

    def test_form4_without_xml(self, sample_form4):
        """A Form 4 with no ownership document still parses."""
        start = sample_form4.index("<DOCUMENT>")
        doc = Form4Extractor().parse(sample_form4[:start], URL)
        assert doc.parsed.ownership_document is None

    def test_form4_serialized_keys(self, sample_form4):
        data = Form4Extractor().parse(sample_form4, URL).to_dict()
        ownership = data["parsed"]["ownershipDocument"]
        assert ownership["issuer"]["issuerTradingSymbol"] == "ACME"
        assert "nonDerivativeTransaction" in ownership["nonDerivativeTable"]

    def test_form3_reporting_person(self, sample_form3):
        doc = Form3Extractor().parse(sample_form3, URL)
        person = doc.parsed.reporting_person
        assert person.owner_data.company_conformed_name == "Doe Jane Q"
        assert person.owner_data.central_index_key == "0001999999"
        assert person.filing_values.sec_file_number == "001-36743"
        assert person.mail_address.city == "CUPERTINO"

    def test_form3_issuer(self, sample_form3):
        doc = Form3Extractor().parse(sample_form3, URL)
        company = doc.parsed.issuer.company_data
        assert company.company_conformed_name == "Acme Widgets Corp"
        assert company.state_of_incorporation == "CA"
        assert company.fiscal_year_end == "0927"
        assert company.ein == "942404110"

    def test_form3_holdings_and_impact(self, sample_form3):
        doc = Form3Extractor().parse(sample_form3, URL)
        ownership = doc.parsed.beneficial_ownership.ownership_document
        holding = ownership.non_derivative_table.non_derivative_holding[0]
        assert holding.post_transaction_amounts.shares_owned_following_transaction == 12500
        assert doc.parsed.ticker == "ACME"
        assert doc.estimated_impact.market_impact == "positive"
        assert doc.estimated_impact.confidence == 0.8


class TestForm13F:
    """Tests for Form13FExtractor."""

    def test_holdings(self, sample_13f):
        """Every infoTable row is kept."""
        doc = Form13FExtractor().parse(sample_13f, URL)
        holdings = doc.parsed.info_table
        assert [h.name_of_issuer for h in holdings] == ["APPLE INC", "MICROSOFT CORP"]
        assert holdings[0].cusip == "037833100"
        assert holdings[0].shrs_or_prn_amt.ssh_prnamt_type == "SH"
        assert holdings[0].voting_authority.sole == 150000

    def test_totals_and_impact(self, sample_13f):
        doc = Form13FExtractor().parse(sample_13f, URL)
        assert doc.parsed.total_value == 5_500_000
        assert doc.parsed.total_shares == 155_000
        assert doc.estimated_impact.market_impact == "positive"
        assert doc.estimated_impact.confidence == 0.7
        assert doc.estimated_impact.total_score == 0.55

    def test_cover_page(self, sample_13f):
        doc = Form13FExtractor().parse(sample_13f, URL)
        assert doc.parsed.filing_manager == "Example Capital Management LLC"
        assert doc.parsed.edgar_submission["formData"]["summaryPage"]["tableEntryTotal"] == 2
        assert len(doc.attachments) == 2

    def test_voting_authority_aliases(self, sample_13f):
        data = Form13FExtractor().parse(sample_13f, URL).to_dict()
        row = data["parsed"]["infoTable"][0]
        assert row["votingAuthority"] == {"Sole": 150000.0, "Shared": 0.0, "None": 0.0}

    def test_no_information_table(self, sample_13f):
        """A cover page with no holdings is a small book."""
        start = sample_13f.index("<TYPE>INFORMATION TABLE")
        doc = Form13FExtractor().parse(sample_13f[:start], URL)
        assert doc.parsed.info_table == []
        assert doc.estimated_impact.market_impact == "neutral"
        assert doc.estimated_impact.confidence == 0.4


class TestSchedules:
    """Tests for Schedule13DExtractor and Schedule13GExtractor."""

    def test_13d_cover_page(self, sample_13d):
        doc = Schedule13DExtractor().parse(sample_13d, URL)
        owned = doc.parsed.securities_owned
        assert doc.parsed.cusip == "037833100"
        assert owned.cusip == "037833100"
        assert owned.sole_voting_power == 1_250_000
        assert owned.shared_voting_power == 0
        assert owned.amount_beneficially_owned == 1_250_000
        assert owned.percent_of_class == 6.2
        assert owned.title_of_class == "Common Stock, par value $0.01 per share"
        assert owned.type_of_reporting_person == "PN"

    def test_13d_parties(self, sample_13d):
        doc = Schedule13DExtractor().parse(sample_13d, URL)
        assert doc.parsed.subject_company[0].company_data.company_conformed_name == "Acme Widgets Corp"
        assert doc.parsed.filed_by[0].company_data.company_conformed_name == "Activist Partners LP"
        assert doc.parsed.company_conformed_name == "Acme Widgets Corp"

    def test_13d_purpose_and_impact(self, sample_13d):
        doc = Schedule13DExtractor().parse(sample_13d, URL)
        assert doc.parsed.purpose_of_transaction.startswith("Item 4. Purpose of Transaction")
        assert "undervalued" in doc.parsed.purpose_of_transaction
        assert doc.estimated_impact.market_impact == "positive"
        assert doc.estimated_impact.confidence == 0.6

    def test_13d_without_cusip(self, sample_8k, caplog):
        """A filing with no CUSIP leaves the field empty and logs the miss."""
        with caplog.at_level(logging.DEBUG, logger="filing_parser.forms.schedule_13d"):
            doc = Schedule13DExtractor().parse(sample_8k, URL)
        assert doc.parsed.cusip is None
        assert "No CUSIP found in 0001193125-25-012345" in caplog.text

    def test_13g_baseline(self, sample_13d):
        """13G reads the same cover page; impact stays at baseline."""
        text = sample_13d.replace("SC 13D", "SC 13G")
        doc = Schedule13GExtractor().parse(text, URL)
        assert doc.parsed.cusip == "037833100"
        assert doc.parsed.securities_owned.percent_of_class == 6.2
        assert doc.estimated_impact.market_impact == "neutral"
        assert doc.estimated_impact.confidence == 0.5

    @pytest.mark.parametrize(
        "text",
        ["CUSIP: 037833100", "CUSIP No. 037833 10 0", "037833100\n(CUSIP Number)"],
    )
    def test_cusip_forms(self, text):
        """Spaces inside the CUSIP are removed."""
        assert extract_cusip(text) == "037833100"


class TestPeriodicReports:
    """Tests for Form10KExtractor."""

    def test_10k_sections(self, sample_10k):
        """Risk factors are split into paragraphs; the TOC is skipped."""
        doc = Form10KExtractor().parse(sample_10k, URL)
        business = doc.parsed.business_information
        assert len(business.risk_factors) == 2
        assert business.risk_factors[0].startswith("Our business depends on a small number of suppliers")
        assert business.risk_factors[1].startswith("We face intense competition")
        assert "designs, manufactures and sells widgets" in business.business_overview
        assert doc.parsed.corporate_governance.executive_compensation is None

    def test_10k_impact(self, sample_10k):
        """Periodic reports stay neutral with a small bump."""
        doc = Form10KExtractor().parse(sample_10k, URL)
        assert doc.estimated_impact.market_impact == "neutral"
        assert doc.estimated_impact.confidence == 0.45

    def test_10q(self, sample_10k):
        """10-Q risk factors run up to Item 2."""
        text = sample_10k.replace("SUBMISSION TYPE:\t10-K", "SUBMISSION TYPE:\t10-Q")
        doc = Form10QExtractor().parse(text, URL)
        assert len(doc.parsed.risk_factors) == 2
        assert doc.estimated_impact.market_impact == "neutral"
        assert doc.estimated_impact.confidence == 0.45


class TestRegistrationStatements:
    """Tests for the S-1, S-4 and S-8 extractors."""

    def test_offering_details(self, sample_s1):
        details = extract_offering_details(sample_s1)
        assert details.title_of_securities == "Common Stock, par value $0.0001 per share"
        assert details.amount_to_be_registered == "10,000,000"
        assert details.proposed_maximum_offering_price_per_share == "$15.00"
        assert details.proposed_maximum_aggregate_offering_price == "$150,000,000"
        assert details.amount_of_registration_fee == "$22,965"

    def test_no_fee_table(self, sample_8k):
        assert extract_offering_details(sample_8k) is None

    def test_s1_end_to_end(self, sample_s1):
        doc = FormS1Extractor().parse(sample_s1, URL)
        assert doc.parsed.offering_details.amount_to_be_registered == "10,000,000"
        assert doc.parsed.ticker == "NEWC"
        assert doc.parsed.company_conformed_name == "NewCo Robotics Inc"
        assert doc.estimated_impact.market_impact == "positive"
        assert doc.estimated_impact.confidence == 0.7

    def test_s4_transaction(self, sample_s1):
        """S-4 reuses the fee table and names the transaction."""
        text = (
            sample_s1
            .replace("CONFORMED SUBMISSION TYPE:\tS-1", "CONFORMED SUBMISSION TYPE:\tS-4")
            .replace("REGISTRATION STATEMENT", "PROXY STATEMENT/PROSPECTUS FOR THE PROPOSED MERGER")
        )
        doc = FormS4Extractor().parse(text, URL)
        details = doc.parsed.transaction_details
        assert isinstance(details, TransactionDetails)
        assert details.transaction_type == "Merger"
        assert details.amount_of_registration_fee == "$22,965"
        assert doc.estimated_impact.market_impact == "positive"
        assert doc.estimated_impact.confidence == 0.75

    def test_classify_transaction_order(self):
        """Business combination outranks merger."""
        text = "<DOCUMENT>\n<TEXT>\nThe merger is a business combination.\n</TEXT>"
        assert classify_transaction(text) == "Business Combination"

    def test_s8_plans(self, sample_s8):
        doc = FormS8Extractor().parse(sample_s8, URL)
        plans = doc.parsed.plan_information
        assert plans.plan_name == "Acme Widgets Corp 2024 Equity Incentive Plan"
        assert plans.plan_names == [
            "Acme Widgets Corp 2024 Equity Incentive Plan",
            "Acme Widgets Corp 2024 Employee Stock Purchase Plan",
        ]
        assert doc.estimated_impact.market_impact == "neutral"
        assert doc.estimated_impact.confidence == 0.5

    def test_s8_without_plans(self):
        assert extract_plan_names("<DOCUMENT>\n<TEXT>\nNo plans here.\n</TEXT>") == []
