"""
Pydantic schemas for form-specific payloads.

Every payload extends ConsistentDocumentFields, so the generic service can
fill the shared header fields and the extractors add their own. Header and
XML records allow extra keys: anything the filing carries that is not
declared here is kept as-is.

Serialized keys are camelCase (see CamelModel).
"""

from typing import Any, Optional

from pydantic import Field

from ..parse.models import (
    Address,
    CompanyData,
    ConsistentDocumentFields,
    EdgarModel,
    Filer,
    FilingValues,
    FormerCompany,
)


# =============================================================================
# SHARED
# =============================================================================

class OfferingDetails(EdgarModel):
    """Registration fee table row (S-1, S-4, S-8)."""
    title_of_securities: Optional[str] = None
    amount_to_be_registered: Optional[str] = None
    proposed_maximum_offering_price_per_share: Optional[str] = None
    proposed_maximum_aggregate_offering_price: Optional[str] = None
    amount_of_registration_fee: Optional[str] = None


class SecuritiesOwned(EdgarModel):
    """Cover page rows of a Schedule 13D / 13G."""
    title_of_class: Optional[str] = None
    cusip: Optional[str] = None
    amount_beneficially_owned: Optional[float] = None
    percent_of_class: Optional[float] = None
    sole_voting_power: Optional[float] = None
    shared_voting_power: Optional[float] = None
    sole_dispositive_power: Optional[float] = None
    shared_dispositive_power: Optional[float] = None
    type_of_reporting_person: Optional[str] = None


# =============================================================================
# OWNERSHIP DOCUMENT (Forms 3 / 4, embedded XML)
# =============================================================================

class OwnershipIssuer(EdgarModel):
    issuer_cik: Optional[str] = None
    issuer_name: Optional[str] = None
    issuer_trading_symbol: Optional[str] = None


class ReportingOwnerId(EdgarModel):
    rpt_owner_cik: Optional[str] = None
    rpt_owner_name: Optional[str] = None


class ReportingOwnerAddress(EdgarModel):
    rpt_owner_street1: Optional[str] = None
    rpt_owner_street2: Optional[str] = None
    rpt_owner_city: Optional[str] = None
    rpt_owner_state: Optional[str] = None
    rpt_owner_zip_code: Optional[str] = None


class ReportingOwnerRelationship(EdgarModel):
    is_director: Optional[bool] = None
    is_officer: Optional[bool] = None
    is_ten_percent_owner: Optional[bool] = None
    is_other: Optional[bool] = None
    officer_title: Optional[str] = None
    other_text: Optional[str] = None


class ReportingOwner(EdgarModel):
    reporting_owner_id: Optional[ReportingOwnerId] = None
    reporting_owner_address: Optional[ReportingOwnerAddress] = None
    reporting_owner_relationship: Optional[ReportingOwnerRelationship] = None


class TransactionCoding(EdgarModel):
    transaction_form_type: Optional[str] = None
    transaction_code: Optional[str] = None
    equity_swap_involved: Optional[str] = None


class TransactionAmounts(EdgarModel):
    transaction_shares: Optional[float] = None
    transaction_price_per_share: Optional[float] = None
    transaction_acquired_disposed_code: Optional[str] = None


class PostTransactionAmounts(EdgarModel):
    shares_owned_following_transaction: Optional[float] = None
    value_owned_following_transaction: Optional[float] = None


class OwnershipNature(EdgarModel):
    direct_or_indirect_ownership: Optional[str] = None
    nature_of_ownership: Optional[str] = None


class UnderlyingSecurity(EdgarModel):
    underlying_security_title: Optional[str] = None
    underlying_security_shares: Optional[float] = None
    underlying_security_value: Optional[float] = None


class NonDerivativeEntry(EdgarModel):
    """A nonDerivativeTransaction or nonDerivativeHolding row."""
    security_title: Optional[str] = None
    transaction_date: Optional[str] = None
    transaction_coding: Optional[TransactionCoding] = None
    transaction_amounts: Optional[TransactionAmounts] = None
    post_transaction_amounts: Optional[PostTransactionAmounts] = None
    ownership_nature: Optional[OwnershipNature] = None


class DerivativeEntry(NonDerivativeEntry):
    """A derivativeTransaction or derivativeHolding row."""
    conversion_or_exercise_price: Optional[float] = None
    exercise_date: Optional[str] = None
    expiration_date: Optional[str] = None
    underlying_security: Optional[UnderlyingSecurity] = None


class NonDerivativeTable(EdgarModel):
    non_derivative_transaction: list[NonDerivativeEntry] = Field(default_factory=list)
    non_derivative_holding: list[NonDerivativeEntry] = Field(default_factory=list)


class DerivativeTable(EdgarModel):
    derivative_transaction: list[DerivativeEntry] = Field(default_factory=list)
    derivative_holding: list[DerivativeEntry] = Field(default_factory=list)


class OwnershipDocument(EdgarModel):
    """<ownershipDocument> of a Form 3 / 4 / 5."""
    schema_version: Optional[str] = None
    document_type: Optional[str] = None
    period_of_report: Optional[str] = None
    issuer: Optional[OwnershipIssuer] = None
    reporting_owner: list[ReportingOwner] = Field(default_factory=list)
    non_derivative_table: Optional[NonDerivativeTable] = None
    derivative_table: Optional[DerivativeTable] = None
    remarks: Optional[str] = None


# =============================================================================
# FORM 8-K
# =============================================================================

class Form8KData(ConsistentDocumentFields):
    """Current report."""
    filer: list[Filer] = Field(default_factory=list)
    conformed_period_of_report: Optional[str] = None
    item_information: list[str] = Field(default_factory=list)


# =============================================================================
# FORMS 3 / 4
# =============================================================================

class Form4Data(ConsistentDocumentFields):
    """Statement of changes in beneficial ownership."""
    ownership_document: Optional[OwnershipDocument] = None


class OwnerData(EdgarModel):
    company_conformed_name: Optional[str] = None
    central_index_key: Optional[str] = None
    organization_name: Optional[str] = None


class ReportingPerson(EdgarModel):
    """REPORTING-OWNER block of a Form 3 header."""
    owner_data: Optional[OwnerData] = None
    filing_values: Optional[FilingValues] = None
    business_address: Optional[Address] = None
    mail_address: Optional[Address] = None


class Form3Issuer(EdgarModel):
    """ISSUER block of a Form 3 header."""
    company_data: Optional[CompanyData] = None
    business_address: Optional[Address] = None
    mail_address: Optional[Address] = None
    former_company: list[FormerCompany] = Field(default_factory=list)


class BeneficialOwnership(EdgarModel):
    ownership_document: Optional[OwnershipDocument] = None


class Form3Data(ConsistentDocumentFields):
    """Initial statement of beneficial ownership."""
    reporting_person: Optional[ReportingPerson] = None
    issuer: Optional[Form3Issuer] = None
    beneficial_ownership: Optional[BeneficialOwnership] = None


# =============================================================================
# FORM 10-K
# =============================================================================

class AnnualBusinessInformation(EdgarModel):
    business_overview: Optional[str] = None
    risk_factors: list[str] = Field(default_factory=list)
    properties: Optional[str] = None
    legal_proceedings: Optional[str] = None
    mine_safety_disclosures: Optional[str] = None


class AnnualFinancialInformation(EdgarModel):
    selected_financial_data: Optional[str] = None
    supplementary_data: Optional[str] = None
    management_discussion_and_analysis: Optional[str] = None
    quantitative_and_qualitative_disclosures: Optional[str] = None


class MarketInformation(EdgarModel):
    market_for_registrant_common_equity: Optional[str] = None
    issuer_purchases_of_equity_securities: Optional[str] = None


class CorporateGovernance(EdgarModel):
    directors_and_executive_officers: Optional[str] = None
    executive_compensation: Optional[str] = None


class Form10KData(ConsistentDocumentFields):
    """Annual report."""
    filer: list[Filer] = Field(default_factory=list)
    business_information: Optional[AnnualBusinessInformation] = None
    financial_information: Optional[AnnualFinancialInformation] = None
    market_information: Optional[MarketInformation] = None
    corporate_governance: Optional[CorporateGovernance] = None


# =============================================================================
# FORM 10-Q
# =============================================================================

class QuarterlyFinancialInformation(EdgarModel):
    financial_statements: Optional[str] = None


class QuarterlyBusinessInformation(EdgarModel):
    management_discussion_and_analysis: Optional[str] = None
    quantitative_and_qualitative_disclosures: Optional[str] = None
    controls_and_procedures: Optional[str] = None


class Form10QData(ConsistentDocumentFields):
    """Quarterly report."""
    filer: list[Filer] = Field(default_factory=list)
    financial_information: Optional[QuarterlyFinancialInformation] = None
    business_information: Optional[QuarterlyBusinessInformation] = None
    market_information: Optional[MarketInformation] = None
    legal_proceedings: Optional[str] = None
    risk_factors: list[str] = Field(default_factory=list)


# =============================================================================
# REGISTRATION STATEMENTS (S-1, S-4, S-8)
# =============================================================================

class BusinessDescription(EdgarModel):
    business_overview: Optional[str] = None
    risk_factors: list[str] = Field(default_factory=list)
    use_of_proceeds: Optional[str] = None
    dividend_policy: Optional[str] = None


class RegistrationFinancialInformation(EdgarModel):
    management_discussion: Optional[str] = None


class FormS1Data(ConsistentDocumentFields):
    """Registration statement (IPOs and other offerings)."""
    filer: list[Filer] = Field(default_factory=list)
    offering_details: Optional[OfferingDetails] = None
    business_description: Optional[BusinessDescription] = None
    financial_information: Optional[RegistrationFinancialInformation] = None


class TransactionDetails(OfferingDetails):
    transaction_type: Optional[str] = None  # Merger, Exchange Offer, ...


class BusinessCombination(EdgarModel):
    summary_of_transaction: Optional[str] = None
    background_of_transaction: Optional[str] = None
    reasons_for_transaction: Optional[str] = None
    recommendation_of_board: Optional[str] = None
    fairness_opinion: Optional[str] = None


class FormS4Data(ConsistentDocumentFields):
    """Registration statement for business combinations."""
    filer: list[Filer] = Field(default_factory=list)
    transaction_details: Optional[TransactionDetails] = None
    business_combination: Optional[BusinessCombination] = None
    risk_factors: list[str] = Field(default_factory=list)
    regulatory_approvals: list[str] = Field(default_factory=list)


class PlanInformation(EdgarModel):
    plan_name: Optional[str] = None
    plan_names: list[str] = Field(default_factory=list)


class FormS8Data(ConsistentDocumentFields):
    """Registration statement for employee benefit plans."""
    filer: list[Filer] = Field(default_factory=list)
    registration_statement: Optional[OfferingDetails] = None
    plan_information: Optional[PlanInformation] = None


# =============================================================================
# FORM 13F-HR
# =============================================================================

class ShrsOrPrnAmt(EdgarModel):
    ssh_prnamt: Optional[float] = None
    ssh_prnamt_type: Optional[str] = None  # SH or PRN


class VotingAuthority(EdgarModel):
    sole: Optional[float] = Field(default=None, alias="Sole")
    shared: Optional[float] = Field(default=None, alias="Shared")
    none: Optional[float] = Field(default=None, alias="None")


class InfoTableEntry(EdgarModel):
    """One holding of the information table."""
    name_of_issuer: Optional[str] = None
    title_of_class: Optional[str] = None
    cusip: Optional[str] = None
    figi: Optional[str] = None
    value: Optional[float] = None
    shrs_or_prn_amt: Optional[ShrsOrPrnAmt] = None
    put_call: Optional[str] = None
    investment_discretion: Optional[str] = None
    other_manager: Optional[str] = None
    voting_authority: Optional[VotingAuthority] = None


class Form13FFiling(ConsistentDocumentFields):
    """Institutional investment manager holdings report."""
    edgar_submission: Optional[dict[str, Any]] = None
    filing_manager: Optional[str] = None
    info_table: list[InfoTableEntry] = Field(default_factory=list)
    total_value: float = 0.0
    total_shares: float = 0.0


# =============================================================================
# SCHEDULES 13D / 13G
# =============================================================================

class Schedule13DData(ConsistentDocumentFields):
    """Beneficial ownership report of an active holder (>5%)."""
    subject_company: list[Filer] = Field(default_factory=list)
    filed_by: list[Filer] = Field(default_factory=list)
    cusip: Optional[str] = None
    securities_owned: Optional[SecuritiesOwned] = None
    purpose_of_transaction: Optional[str] = None


class Schedule13GData(ConsistentDocumentFields):
    """Beneficial ownership report of a passive holder (>5%)."""
    subject_company: list[Filer] = Field(default_factory=list)
    filed_by: list[Filer] = Field(default_factory=list)
    cusip: Optional[str] = None
    securities_owned: Optional[SecuritiesOwned] = None
