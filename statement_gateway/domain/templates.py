"""Registry of co-operative bank templates used for transaction labels"""

from typing import Dict, List

from statement_gateway.domain.exceptions import UnknownTemplateError
from statement_gateway.domain.models import BankTemplate

_SELF_WITHDRAWALS = ("CHEQUE Withdrawal by Self", "CASH Withdrawal")

_TEMPLATES = [
    BankTemplate(
        id="sarbeshwor",
        name="Sarbeshwor Saving & Credit Co-operative Ltd.",
        location="Kalanki-14, Kathmandu, Nepal",
        deposits=(
            "CASH DEPOSIT",
            "Cash Deposit by Self",
            "Cash Deposit by Bimal Bhusal",
            "Cash Deposit by Sita Pandey",
        ),
        withdrawals=_SELF_WITHDRAWALS,
    ),
    BankTemplate(
        id="devipur",
        name="Shree Devipur Multipurpose Co-operative Society Ltd.",
        location="Butwal-13, Rupandehi",
        deposits=(
            "Cash Deposit by Self",
            "Cash Deposit by Bimal Khadka",
            "Cash Deposit by Suman Khadka",
            "Cash Deposit by Kalpana Pandey",
            "Cash Deposit by Bimal Bhusal",
            "Cash Deposit by Sita Pandey",
        ),
        withdrawals=_SELF_WITHDRAWALS,
    ),
    BankTemplate(
        id="prabhabkari",
        name="Prabhabkari Krishi Sahakari Sanstha Ltd.",
        location="Tulsipur-7, Dang",
        deposits=(
            "Cash Deposit by Self",
            "Cash Deposit by Bhuvan K C",
            "Cash Deposit by Numa Lama",
            "Cash Deposit by Soni Rai",
        ),
        withdrawals=_SELF_WITHDRAWALS,
    ),
    BankTemplate(
        id="siddhapaluwa",
        name="Siddha Paluwa Sahakari Sastha Limited",
        location="Rolpa-8, Nayabazar",
        deposits=(
            "Cash Deposit by Self",
            "Cash Deposit by Toplal Thapa",
            "Cash Deposit by Suman Pandey",
            "Cash Deposit by Pabitra Pandey",
        ),
        withdrawals=_SELF_WITHDRAWALS,
    ),
    BankTemplate(
        id="durwasha",
        name="Durwasha Bachat Tatha Rin Sahakari Sanstha Li.",
        location="Butwal, Rupandehi",
        deposits=(
            "Cash Deposit by Self",
            "Cash Deposit by Bhuvan K C",
            "Cash Deposit by Numa Lama",
        ),
        withdrawals=_SELF_WITHDRAWALS,
    ),
    BankTemplate(
        id="agnijwala",
        name="Agnijwala Saving & Credit Co-operative Ltd.",
        location="Kalanki-14, Kathmandu, Nepal",
        deposits=(
            "Cash Deposit by Self",
            "Cash Deposit by Suman Thapa",
            "Cash Deposit by Kalpana Rai",
        ),
        withdrawals=_SELF_WITHDRAWALS,
        tax="Tax Deduction",
    ),
    BankTemplate(
        id="dhaulagiri",
        name="Dhaulagiri Multipurpose Co-operative Society Ltd.",
        location="Butwal-08, Rupandehi",
        deposits=(
            "Cash Deposit by Self",
            "Cash Deposit by Nima Rai",
            "Cash Deposit by Hari Pandey",
            "Cash Deposit by Rajan Thapa",
        ),
        withdrawals=_SELF_WITHDRAWALS,
    ),
    BankTemplate(
        id="aarati",
        name="Aarati Multipurpose Co-operative Ltd.",
        location="Butwal-11, Rupandehi",
        deposits=(
            "Cash Deposit by Self",
            "Cash Deposit by Rina Sunar",
            "Cash Deposit by Suman Pandey",
            "Cash Deposit by Bandana Kafle",
            "Cash Deposit by Mina Kafle",
            "Cash Deposit by Nima Bhusal",
            "Cash Deposit by Shila Thapa",
        ),
        withdrawals=_SELF_WITHDRAWALS,
    ),
    BankTemplate(
        id="aarogya",
        name="Aarogya Saving & Credit Co-operative Ltd.",
        location="Kathmandu",
        deposits=tuple(
            f"Cash Dep. By {who}"
            for who in (
                "Self", "Aruna", "Dipak", "Nirmala", "Kushal", "Prabin", "Lokendra",
                "Muskan", "Sajan", "Binod", "Lokesh", "Rabindra", "Dikshya",
            )
        ),
        withdrawals=("Cheque Withdrawal By Self", "Cash Withdrawal By Self"),
        interest="Interest",
        tax="Tax Deduction",
    ),
    BankTemplate(
        id="nilratna",
        name="Nilratna Saving & Credit Co-operative Ltd.",
        location="Asan, Nyeud, Kathmandu",
        deposits=(
            "Cash Deposit by Self",
            "Cash Deposit by Bhuvan K C",
            "Cash Deposit by Numa Lama",
            "Cash Deposit by Soni Rai",
        ),
        withdrawals=_SELF_WITHDRAWALS,
    ),
]

TEMPLATES: Dict[str, BankTemplate] = {t.id: t for t in _TEMPLATES}


def get_template(template_id: str) -> BankTemplate:
    """
    Look up a template by id.

    Raises:
        UnknownTemplateError: If no template has that id
    """
    try:
        return TEMPLATES[template_id]
    except KeyError:
        raise UnknownTemplateError(template_id) from None


def list_templates() -> List[BankTemplate]:
    """All templates in registry order"""
    return list(TEMPLATES.values())
