"""Display formatting for statement amounts and dates"""

from datetime import date

_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

_ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
_TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]


def format_money(paisa: int) -> str:
    """2319840.90 NPR (231984090 paisa) -> '2,319,840.90'"""
    sign = "-" if paisa < 0 else ""
    rupees, remainder = divmod(abs(paisa), 100)
    return f"{sign}{rupees:,}.{remainder:02d}"


def format_display_date(day: date) -> str:
    """date(2024, 7, 28) -> '28-Jul-2024'"""
    return f"{day.day:02d}-{_MONTHS[day.month - 1]}-{day.year}"


def _below_thousand(num: int) -> str:
    if num == 0:
        return ""
    if num < 10:
        return _ONES[num]
    if num < 20:
        return _TEENS[num - 10]
    if num < 100:
        return _TENS[num // 10] + (" " + _ONES[num % 10] if num % 10 else "")
    rest = num % 100
    return _ONES[num // 100] + " Hundred" + (" And " + _below_thousand(rest) if rest else "")


def amount_in_words(paisa: int) -> str:
    """
    Spell an amount using the Nepali numbering system.

    Groups are Crore (10^7), Lakh (10^5), Thousand and the last three
    digits; a non-zero paisa part is appended as "And <n> Paisa".

    Example:
        123456789 paisa -> "Twelve Lakh Thirty Four Thousand Five Hundred
        And Sixty Seven And Eighty Nine Paisa"
    """
    if paisa < 0:
        return ""
    if paisa == 0:
        return "Zero"

    rupees, fraction = divmod(paisa, 100)
    crore = rupees // 10_000_000
    lakh = (rupees % 10_000_000) // 100_000
    thousand = (rupees % 100_000) // 1000
    remainder = rupees % 1000

    words = ""
    if crore:
        # amounts past 99 crore spell the crore count recursively
        words += (amount_in_words(crore * 100) if crore >= 1000 else _below_thousand(crore)) + " Crore "
    if lakh:
        words += _below_thousand(lakh) + " Lakh "
    if thousand:
        words += _below_thousand(thousand) + " Thousand "
    if remainder:
        words += _below_thousand(remainder)

    words = words.strip()
    if fraction:
        words += " And " + _below_thousand(fraction) + " Paisa"
    return words.strip()
