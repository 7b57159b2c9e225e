"""
Sample EDGAR submissions shared by the test modules.

The samples are trimmed-down versions of real full-text submissions: the SGML
header keeps its nested layout, the bodies keep only what the tests read.
"""

import pytest


# ─── Form 8-K ───

SAMPLE_8K = """<SEC-DOCUMENT>0001193125-25-012345.txt : 20250128
<SEC-HEADER>0001193125-25-012345.hdr.sgml : 20250128
<ACCEPTANCE-DATETIME>20250128140548
ACCESSION NUMBER:		0001193125-25-012345
CONFORMED SUBMISSION TYPE:	8-K
PUBLIC DOCUMENT COUNT:		0
CONFORMED PERIOD OF REPORT:	20250127
ITEM INFORMATION:		Other Events
ITEM INFORMATION:		Financial Statements and Exhibits
FILED AS OF DATE:		20250128
DATE AS OF CHANGE:		20250128

FILER:

	COMPANY DATA:
		COMPANY CONFORMED NAME:			Acme Widgets Corp
		CENTRAL INDEX KEY:			0000320193
		STANDARD INDUSTRIAL CLASSIFICATION:	ELECTRONIC COMPUTERS [3571]
		IRS NUMBER:				942404110
		STATE OF INCORPORATION:			CA
		FISCAL YEAR END:			0927

	FILING VALUES:
		FORM TYPE:		8-K
		SEC ACT:		1934 Act
		SEC FILE NUMBER:	001-36743
		FILM NUMBER:		25565432

	BUSINESS ADDRESS:
		STREET 1:		ONE WIDGET WAY
		STREET 2:
		CITY:			CUPERTINO
		STATE:			CA
		ZIP:			95014
		BUSINESS PHONE:		(408) 996-1010
</SEC-HEADER>
<DOCUMENT>
<TYPE>8-K
<SEQUENCE>1
<FILENAME>d12345d8k.htm
<TEXT>
<html><body>
<p>Acme Widgets Corp (NYSE American: FAX) today announced the closing of its new facility.</p>
<p>Item 8.01 Other Events.</p>
<p>Item 9.01 Financial Statements and Exhibits.</p>
</body></html>
</TEXT>
</DOCUMENT>
</SEC-DOCUMENT>
"""


# ─── Form 4 / Form 3 ───

OWNERSHIP_HEADER = """<SEC-HEADER>0001127602-25-001122.hdr.sgml : 20250115
<ACCEPTANCE-DATETIME>20250115183012
ACCESSION NUMBER:		0001127602-25-001122
CONFORMED SUBMISSION TYPE:	{form}
PUBLIC DOCUMENT COUNT:		1
CONFORMED PERIOD OF REPORT:	20250113
FILED AS OF DATE:		20250115
DATE AS OF CHANGE:		20250115

REPORTING-OWNER:

	OWNER DATA:
		COMPANY CONFORMED NAME:			Doe Jane Q
		CENTRAL INDEX KEY:			0001999999

	FILING VALUES:
		FORM TYPE:		{form}
		SEC ACT:		1934 Act
		SEC FILE NUMBER:	001-36743
		FILM NUMBER:		25530001

	MAIL ADDRESS:
		STREET 1:		ONE WIDGET WAY
		CITY:			CUPERTINO
		STATE:			CA
		ZIP:			95014

ISSUER:

	COMPANY DATA:
		COMPANY CONFORMED NAME:			Acme Widgets Corp
		CENTRAL INDEX KEY:			0000320193
		STANDARD INDUSTRIAL CLASSIFICATION:	ELECTRONIC COMPUTERS [3571]
		IRS NUMBER:				942404110
		STATE OF INCORPORATION:			CA
		FISCAL YEAR END:			0927
</SEC-HEADER>
"""

FORM_4_XML = """<ownershipDocument>
    <schemaVersion>X0508</schemaVersion>
    <documentType>4</documentType>
    <periodOfReport>2025-01-13</periodOfReport>
    <issuer>
        <issuerCik>0000320193</issuerCik>
        <issuerName>Acme Widgets Corp</issuerName>
        <issuerTradingSymbol>ACME</issuerTradingSymbol>
    </issuer>
    <reportingOwner>
        <reportingOwnerId>
            <rptOwnerCik>0001999999</rptOwnerCik>
            <rptOwnerName>Doe Jane Q</rptOwnerName>
        </reportingOwnerId>
        <reportingOwnerRelationship>
            <isDirector>0</isDirector>
            <isOfficer>1</isOfficer>
            <officerTitle>Chief Financial Officer</officerTitle>
        </reportingOwnerRelationship>
    </reportingOwner>
    <nonDerivativeTable>
        <nonDerivativeTransaction>
            <securityTitle><value>Common Stock</value></securityTitle>
            <transactionDate><value>2025-01-13</value></transactionDate>
            <transactionCoding>
                <transactionFormType>4</transactionFormType>
                <transactionCode>S</transactionCode>
                <equitySwapInvolved>0</equitySwapInvolved>
            </transactionCoding>
            <transactionAmounts>
                <transactionShares><value>1,000</value><footnoteId id="F1"/></transactionShares>
                <transactionPricePerShare><value>225.50</value></transactionPricePerShare>
                <transactionAcquiredDisposedCode><value>D</value></transactionAcquiredDisposedCode>
            </transactionAmounts>
            <postTransactionAmounts>
                <sharesOwnedFollowingTransaction><value>50000</value></sharesOwnedFollowingTransaction>
            </postTransactionAmounts>
            <ownershipNature>
                <directOrIndirectOwnership><value>D</value></directOrIndirectOwnership>
            </ownershipNature>
        </nonDerivativeTransaction>
    </nonDerivativeTable>
    <footnotes>
        <footnote id="F1">Sold under a Rule 10b5-1 trading plan.</footnote>
    </footnotes>
</ownershipDocument>"""

FORM_3_XML = """<ownershipDocument>
    <schemaVersion>X0206</schemaVersion>
    <documentType>3</documentType>
    <periodOfReport>2025-01-13</periodOfReport>
    <noSecuritiesOwned>0</noSecuritiesOwned>
    <issuer>
        <issuerCik>0000320193</issuerCik>
        <issuerName>Acme Widgets Corp</issuerName>
        <issuerTradingSymbol>ACME</issuerTradingSymbol>
    </issuer>
    <reportingOwner>
        <reportingOwnerId>
            <rptOwnerCik>0001999999</rptOwnerCik>
            <rptOwnerName>Doe Jane Q</rptOwnerName>
        </reportingOwnerId>
        <reportingOwnerRelationship>
            <isDirector>1</isDirector>
        </reportingOwnerRelationship>
    </reportingOwner>
    <nonDerivativeTable>
        <nonDerivativeHolding>
            <securityTitle><value>Common Stock</value></securityTitle>
            <postTransactionAmounts>
                <sharesOwnedFollowingTransaction><value>12500</value></sharesOwnedFollowingTransaction>
            </postTransactionAmounts>
            <ownershipNature>
                <directOrIndirectOwnership><value>D</value></directOrIndirectOwnership>
            </ownershipNature>
        </nonDerivativeHolding>
    </nonDerivativeTable>
</ownershipDocument>"""


def _ownership_submission(form: str, xml: str) -> str:
    return (
        OWNERSHIP_HEADER.format(form=form)
        + "<DOCUMENT>\n<TYPE>" + form + "\n<SEQUENCE>1\n<FILENAME>wf-form" + form + ".xml\n"
        + "<TEXT>\n<XML>\n<?xml version=\"1.0\"?>\n" + xml + "\n</XML>\n</TEXT>\n</DOCUMENT>\n"
    )


# ─── Form 13F-HR ───

SAMPLE_13F = """<SEC-HEADER>0000950123-25-001234.hdr.sgml : 20250214
<ACCEPTANCE-DATETIME>20250214160102
ACCESSION NUMBER:		0000950123-25-001234
CONFORMED SUBMISSION TYPE:	13F-HR
PUBLIC DOCUMENT COUNT:		2
CONFORMED PERIOD OF REPORT:	20241231
FILED AS OF DATE:		20250214
DATE AS OF CHANGE:		20250214

FILER:

	COMPANY DATA:
		COMPANY CONFORMED NAME:			Example Capital Management LLC
		CENTRAL INDEX KEY:			0001234567
		STATE OF INCORPORATION:			DE

	FILING VALUES:
		FORM TYPE:		13F-HR
		SEC ACT:		1934 Act
		SEC FILE NUMBER:	028-12345
		FILM NUMBER:		25630001
</SEC-HEADER>
<DOCUMENT>
<TYPE>13F-HR
<SEQUENCE>1
<FILENAME>primary_doc.xml
<TEXT>
<XML>
<?xml version="1.0" encoding="UTF-8"?>
<edgarSubmission xmlns="http://www.sec.gov/edgar/thirteenffiler" xmlns:com="http://www.sec.gov/edgar/common">
  <headerData>
    <submissionType>13F-HR</submissionType>
  </headerData>
  <formData>
    <coverPage>
      <reportCalendarOrQuarter>12-31-2024</reportCalendarOrQuarter>
      <filingManager>
        <name>Example Capital Management LLC</name>
        <address>
          <com:street1>1 Main Street</com:street1>
          <com:city>Boston</com:city>
        </address>
      </filingManager>
    </coverPage>
    <summaryPage>
      <otherIncludedManagersCount>0</otherIncludedManagersCount>
      <tableEntryTotal>2</tableEntryTotal>
      <tableValueTotal>5500000</tableValueTotal>
    </summaryPage>
  </formData>
</edgarSubmission>
</XML>
</TEXT>
</DOCUMENT>
<DOCUMENT>
<TYPE>INFORMATION TABLE
<SEQUENCE>2
<FILENAME>infotable.xml
<TEXT>
<XML>
<?xml version="1.0" encoding="UTF-8"?>
<ns1:informationTable xmlns:ns1="http://www.sec.gov/edgar/document/thirteenf/informationtable">
  <ns1:infoTable>
    <ns1:nameOfIssuer>APPLE INC</ns1:nameOfIssuer>
    <ns1:titleOfClass>COM</ns1:titleOfClass>
    <ns1:cusip>037833100</ns1:cusip>
    <ns1:value>3,500,000</ns1:value>
    <ns1:shrsOrPrnAmt>
      <ns1:sshPrnamt>150000</ns1:sshPrnamt>
      <ns1:sshPrnamtType>SH</ns1:sshPrnamtType>
    </ns1:shrsOrPrnAmt>
    <ns1:investmentDiscretion>SOLE</ns1:investmentDiscretion>
    <ns1:votingAuthority>
      <ns1:Sole>150000</ns1:Sole>
      <ns1:Shared>0</ns1:Shared>
      <ns1:None>0</ns1:None>
    </ns1:votingAuthority>
  </ns1:infoTable>
  <ns1:infoTable>
    <ns1:nameOfIssuer>MICROSOFT CORP</ns1:nameOfIssuer>
    <ns1:titleOfClass>COM</ns1:titleOfClass>
    <ns1:cusip>594918104</ns1:cusip>
    <ns1:value>2000000</ns1:value>
    <ns1:shrsOrPrnAmt>
      <ns1:sshPrnamt>5000</ns1:sshPrnamt>
      <ns1:sshPrnamtType>SH</ns1:sshPrnamtType>
    </ns1:shrsOrPrnAmt>
    <ns1:investmentDiscretion>SOLE</ns1:investmentDiscretion>
    <ns1:votingAuthority>
      <ns1:Sole>5000</ns1:Sole>
      <ns1:Shared>0</ns1:Shared>
      <ns1:None>0</ns1:None>
    </ns1:votingAuthority>
  </ns1:infoTable>
</ns1:informationTable>
</XML>
</TEXT>
</DOCUMENT>
"""


# ─── Schedule 13D ───

PURPOSE_PARAGRAPH = (
    "The Reporting Persons acquired the Shares because they believe the Shares are undervalued "
    "and represent an attractive investment opportunity. The Reporting Persons intend to engage "
    "in discussions with management and the board regarding strategy, capital allocation and "
    "board composition, and may seek representation on the board of directors."
)

SAMPLE_13D = """<SEC-HEADER>0000902664-25-000777.hdr.sgml : 20250301
<ACCEPTANCE-DATETIME>20250301120000
ACCESSION NUMBER:		0000902664-25-000777
CONFORMED SUBMISSION TYPE:	SC 13D
PUBLIC DOCUMENT COUNT:		1
FILED AS OF DATE:		20250301
DATE AS OF CHANGE:		20250301

SUBJECT COMPANY:

	COMPANY DATA:
		COMPANY CONFORMED NAME:			Acme Widgets Corp
		CENTRAL INDEX KEY:			0000320193

FILED BY:

	COMPANY DATA:
		COMPANY CONFORMED NAME:			Activist Partners LP
		CENTRAL INDEX KEY:			0001555555
</SEC-HEADER>
<DOCUMENT>
<TYPE>SC 13D
<SEQUENCE>1
<FILENAME>sc13d.htm
<TEXT>
<html><body>
<p>SCHEDULE 13D</p>
<p>Common Stock, par value $0.01 per share</p>
<p>(Title of Class of Securities)</p>
<p>037833100</p>
<p>(CUSIP Number)</p>
<table>
<tr><td>7.</td><td>SOLE VOTING POWER</td><td>1,250,000</td></tr>
<tr><td>8.</td><td>SHARED VOTING POWER</td><td>0</td></tr>
<tr><td>9.</td><td>SOLE DISPOSITIVE POWER</td><td>1,250,000</td></tr>
<tr><td>10.</td><td>SHARED DISPOSITIVE POWER</td><td>0</td></tr>
<tr><td>11.</td><td>AGGREGATE AMOUNT BENEFICIALLY OWNED BY EACH REPORTING PERSON</td><td>1,250,000</td></tr>
<tr><td>13.</td><td>PERCENT OF CLASS REPRESENTED BY AMOUNT IN ROW (11)</td><td>6.2%</td></tr>
<tr><td>14.</td><td>TYPE OF REPORTING PERSON</td><td>PN</td></tr>
</table>
<p>Item 4. Purpose of Transaction</p>
<p>""" + PURPOSE_PARAGRAPH + """</p>
<p>Item 5. Interest in Securities of the Issuer</p>
</body></html>
</TEXT>
</DOCUMENT>
"""


# ─── Form 10-K ───

RISK_PARAGRAPH_1 = (
    "Our business depends on a small number of suppliers for key components, and any disruption "
    "in their operations could materially delay our production and harm our results."
)
RISK_PARAGRAPH_2 = (
    "We face intense competition in every market we serve, and competitors with greater "
    "resources may reduce our market share or force us to lower prices."
)

SAMPLE_10K = """<SEC-HEADER>0000320193-25-000008.hdr.sgml : 20250131
<ACCEPTANCE-DATETIME>20250130163208
ACCESSION NUMBER:		0000320193-25-000008
CONFORMED SUBMISSION TYPE:	10-K
PUBLIC DOCUMENT COUNT:		1
FILED AS OF DATE:		20250131

FILER:

	COMPANY DATA:
		COMPANY CONFORMED NAME:			Acme Widgets Corp
		CENTRAL INDEX KEY:			0000320193
</SEC-HEADER>
<DOCUMENT>
<TYPE>10-K
<SEQUENCE>1
<FILENAME>acme-10k.txt
<TEXT>
TABLE OF CONTENTS

Item 1. Business 3
Item 1A. Risk Factors 12
Item 1B. Unresolved Staff Comments 20
Item 2. Properties 21

PART I

Item 1. Business

Acme Widgets Corp designs, manufactures and sells widgets, gadgets and related accessories to
consumers and businesses worldwide. The Company operates through three reportable segments and
sells its products through direct and indirect distribution channels in more than forty countries.

Item 1A. Risk Factors

""" + RISK_PARAGRAPH_1 + """

""" + RISK_PARAGRAPH_2 + """

Item 1B. Unresolved Staff Comments

None.

Item 2. Properties

The Company's headquarters are located in Cupertino, California.
</TEXT>
</DOCUMENT>
"""


# ─── Form S-1 ───

SAMPLE_S1 = """<SEC-HEADER>0001193125-25-054321.hdr.sgml : 20250305
<ACCEPTANCE-DATETIME>20250305170512
ACCESSION NUMBER:		0001193125-25-054321
CONFORMED SUBMISSION TYPE:	S-1
PUBLIC DOCUMENT COUNT:		1
FILED AS OF DATE:		20250305

FILER:

	COMPANY DATA:
		COMPANY CONFORMED NAME:			NewCo Robotics Inc
		CENTRAL INDEX KEY:			0001888888
</SEC-HEADER>
<DOCUMENT>
<TYPE>S-1
<SEQUENCE>1
<FILENAME>newco-s1.txt
<TEXT>
REGISTRATION STATEMENT UNDER THE SECURITIES ACT OF 1933

CALCULATION OF REGISTRATION FEE

Title of Each Class of Securities to be Registered
Amount to be Registered(1)
Proposed Maximum Offering Price Per Share(2)
Proposed Maximum Aggregate Offering Price(2)
Amount of Registration Fee

Common Stock, par value $0.0001 per share
10,000,000
$15.00
$150,000,000
$22,965

We have applied to list our common stock on the Nasdaq Global Market under the symbol "NEWC".
</TEXT>
</DOCUMENT>
"""


# ─── Form S-8 ───

SAMPLE_S8 = """<SEC-HEADER>0001193125-25-065432.hdr.sgml : 20250310
<ACCEPTANCE-DATETIME>20250310080000
ACCESSION NUMBER:		0001193125-25-065432
CONFORMED SUBMISSION TYPE:	S-8
PUBLIC DOCUMENT COUNT:		1
FILED AS OF DATE:		20250310

FILER:

	COMPANY DATA:
		COMPANY CONFORMED NAME:			Acme Widgets Corp
		CENTRAL INDEX KEY:			0000320193
</SEC-HEADER>
<DOCUMENT>
<TYPE>S-8
<SEQUENCE>1
<FILENAME>acme-s8.txt
<TEXT>
This registration statement registers shares issuable under the Acme Widgets Corp 2024 Equity
Incentive Plan and the Acme Widgets Corp 2024 Employee Stock Purchase Plan.
</TEXT>
</DOCUMENT>
"""


@pytest.fixture
def sample_8k() -> str:
    return SAMPLE_8K


@pytest.fixture
def sample_form4() -> str:
    return _ownership_submission("4", FORM_4_XML)


@pytest.fixture
def sample_form3() -> str:
    return _ownership_submission("3", FORM_3_XML)


@pytest.fixture
def sample_13f() -> str:
    return SAMPLE_13F


@pytest.fixture
def sample_13d() -> str:
    return SAMPLE_13D


@pytest.fixture
def sample_10k() -> str:
    return SAMPLE_10K


@pytest.fixture
def sample_s1() -> str:
    return SAMPLE_S1


@pytest.fixture
def sample_s8() -> str:
    return SAMPLE_S8
