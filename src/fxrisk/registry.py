"""
Currency Registry

Static metadata for supported ISO 4217 codes plus the lookup helpers used
to normalize, validate and auto-detect currencies.
"""

from fxrisk.models import Currency

DEFAULT_CURRENCY = "USD"


class UnsupportedCurrencyError(ValueError):
    """Raised when a currency code is not in the registry."""

    def __init__(self, code: str):
        super().__init__(f"Currency {code!r} not supported")
        self.code = code


def _c(code, name, symbol, decimals, countries, locale) -> Currency:
    return Currency(
        code=code,
        name=name,
        symbol=symbol,
        decimal_places=decimals,
        countries=tuple(countries),
        locale=locale,
    )


SUPPORTED_CURRENCIES: tuple[Currency, ...] = (
    # Majors
    _c("USD", "US Dollar", "$", 2, ["US", "EC", "SV", "PR", "TL", "ZW"], "en_US"),
    _c("EUR", "Euro", "€", 2, [
        "DE", "FR", "IT", "ES", "NL", "BE", "AT", "PT", "FI", "IE", "LU", "SI",
        "SK", "EE", "LV", "LT", "MT", "CY", "GR", "HR", "MC", "SM", "VA", "AD",
        "ME", "XK",
    ], "de_DE"),
    _c("GBP", "British Pound Sterling", "£", 2, ["GB", "IM", "JE", "GG"], "en_GB"),
    _c("JPY", "Japanese Yen", "¥", 0, ["JP"], "ja_JP"),
    _c("CHF", "Swiss Franc", "CHF", 2, ["CH", "LI"], "de_CH"),
    _c("CAD", "Canadian Dollar", "C$", 2, ["CA"], "en_CA"),
    _c("AUD", "Australian Dollar", "A$", 2, ["AU", "KI", "NR", "TV"], "en_AU"),
    _c("NZD", "New Zealand Dollar", "NZ$", 2, ["NZ", "CK", "NU"], "en_NZ"),
    # Asia-Pacific
    _c("CNY", "Chinese Yuan", "¥", 2, ["CN"], "zh_CN"),
    _c("HKD", "Hong Kong Dollar", "HK$", 2, ["HK"], "zh_HK"),
    _c("TWD", "New Taiwan Dollar", "NT$", 2, ["TW"], "zh_TW"),
    _c("KRW", "South Korean Won", "₩", 0, ["KR"], "ko_KR"),
    _c("SGD", "Singapore Dollar", "S$", 2, ["SG"], "en_SG"),
    _c("INR", "Indian Rupee", "₹", 2, ["IN", "BT"], "en_IN"),
    _c("THB", "Thai Baht", "฿", 2, ["TH"], "th_TH"),
    _c("IDR", "Indonesian Rupiah", "Rp", 2, ["ID"], "id_ID"),
    _c("MYR", "Malaysian Ringgit", "RM", 2, ["MY"], "ms_MY"),
    _c("PHP", "Philippine Peso", "₱", 2, ["PH"], "en_PH"),
    _c("VND", "Vietnamese Dong", "₫", 0, ["VN"], "vi_VN"),
    _c("PKR", "Pakistani Rupee", "₨", 2, ["PK"], "en_PK"),
    _c("BDT", "Bangladeshi Taka", "৳", 2, ["BD"], "bn_BD"),
    _c("LKR", "Sri Lankan Rupee", "Rs", 2, ["LK"], "si_LK"),
    _c("NPR", "Nepalese Rupee", "Rs", 2, ["NP"], "ne_NP"),
    _c("MMK", "Myanmar Kyat", "K", 2, ["MM"], "my_MM"),
    _c("KHR", "Cambodian Riel", "៛", 2, ["KH"], "km_KH"),
    _c("LAK", "Lao Kip", "₭", 2, ["LA"], "lo_LA"),
    _c("MNT", "Mongolian Tugrik", "₮", 2, ["MN"], "mn_MN"),
    _c("FJD", "Fijian Dollar", "FJ$", 2, ["FJ"], "en_FJ"),
    # Europe (non-euro)
    _c("NOK", "Norwegian Krone", "kr", 2, ["NO", "SJ", "BV"], "nb_NO"),
    _c("SEK", "Swedish Krona", "kr", 2, ["SE"], "sv_SE"),
    _c("DKK", "Danish Krone", "kr", 2, ["DK", "GL", "FO"], "da_DK"),
    _c("ISK", "Icelandic Krona", "kr", 0, ["IS"], "is_IS"),
    _c("PLN", "Polish Zloty", "zł", 2, ["PL"], "pl_PL"),
    _c("CZK", "Czech Koruna", "Kč", 2, ["CZ"], "cs_CZ"),
    _c("HUF", "Hungarian Forint", "Ft", 2, ["HU"], "hu_HU"),
    _c("RON", "Romanian Leu", "lei", 2, ["RO"], "ro_RO"),
    _c("BGN", "Bulgarian Lev", "лв", 2, ["BG"], "bg_BG"),
    _c("RSD", "Serbian Dinar", "дин.", 2, ["RS"], "sr_RS"),
    _c("MKD", "Macedonian Denar", "ден", 2, ["MK"], "mk_MK"),
    _c("ALL", "Albanian Lek", "L", 2, ["AL"], "sq_AL"),
    _c("BAM", "Bosnia-Herzegovina Convertible Mark", "KM", 2, ["BA"], "bs_BA"),
    _c("MDL", "Moldovan Leu", "L", 2, ["MD"], "ro_MD"),
    _c("UAH", "Ukrainian Hryvnia", "₴", 2, ["UA"], "uk_UA"),
    _c("BYN", "Belarusian Ruble", "Br", 2, ["BY"], "be_BY"),
    _c("RUB", "Russian Ruble", "₽", 2, ["RU"], "ru_RU"),
    _c("TRY", "Turkish Lira", "₺", 2, ["TR"], "tr_TR"),
    _c("GEL", "Georgian Lari", "₾", 2, ["GE"], "ka_GE"),
    _c("AMD", "Armenian Dram", "֏", 2, ["AM"], "hy_AM"),
    _c("AZN", "Azerbaijani Manat", "₼", 2, ["AZ"], "az_AZ"),
    _c("KZT", "Kazakhstani Tenge", "₸", 2, ["KZ"], "kk_KZ"),
    _c("UZS", "Uzbekistani Som", "soʻm", 2, ["UZ"], "uz_UZ"),
    # Middle East & North Africa
    _c("ILS", "Israeli New Shekel", "₪", 2, ["IL", "PS"], "he_IL"),
    _c("AED", "UAE Dirham", "د.إ", 2, ["AE"], "ar_AE"),
    _c("SAR", "Saudi Riyal", "﷼", 2, ["SA"], "ar_SA"),
    _c("QAR", "Qatari Riyal", "ر.ق", 2, ["QA"], "ar_QA"),
    _c("KWD", "Kuwaiti Dinar", "د.ك", 3, ["KW"], "ar_KW"),
    _c("BHD", "Bahraini Dinar", ".د.ب", 3, ["BH"], "ar_BH"),
    _c("OMR", "Omani Rial", "ر.ع.", 3, ["OM"], "ar_OM"),
    _c("JOD", "Jordanian Dinar", "د.ا", 3, ["JO"], "ar_JO"),
    _c("IQD", "Iraqi Dinar", "ع.د", 3, ["IQ"], "ar_IQ"),
    _c("IRR", "Iranian Rial", "﷼", 2, ["IR"], "fa_IR"),
    _c("LBP", "Lebanese Pound", "ل.ل", 2, ["LB"], "ar_LB"),
    _c("EGP", "Egyptian Pound", "E£", 2, ["EG"], "ar_EG"),
    _c("MAD", "Moroccan Dirham", "MAD", 2, ["MA", "EH"], "ar_MA"),
    _c("TND", "Tunisian Dinar", "د.ت", 3, ["TN"], "ar_TN"),
    # Sub-Saharan Africa
    _c("ZAR", "South African Rand", "R", 2, ["ZA", "LS"], "en_ZA"),
    _c("NGN", "Nigerian Naira", "₦", 2, ["NG"], "en_NG"),
    _c("KES", "Kenyan Shilling", "KSh", 2, ["KE"], "en_KE"),
    _c("GHS", "Ghanaian Cedi", "GH₵", 2, ["GH"], "en_GH"),
    _c("ETB", "Ethiopian Birr", "Br", 2, ["ET"], "am_ET"),
    _c("TZS", "Tanzanian Shilling", "TSh", 2, ["TZ"], "sw_TZ"),
    _c("UGX", "Ugandan Shilling", "USh", 0, ["UG"], "en_UG"),
    _c("ZMW", "Zambian Kwacha", "ZK", 2, ["ZM"], "en_ZM"),
    _c("BWP", "Botswana Pula", "P", 2, ["BW"], "en_BW"),
    _c("NAD", "Namibian Dollar", "N$", 2, ["NA"], "en_NA"),
    _c("MUR", "Mauritian Rupee", "₨", 2, ["MU"], "en_MU"),
    _c("XOF", "West African CFA Franc", "CFA", 0, [
        "SN", "CI", "BJ", "BF", "ML", "NE", "TG", "GW",
    ], "fr_SN"),
    _c("XAF", "Central African CFA Franc", "FCFA", 0, [
        "CM", "CF", "TD", "CG", "GQ", "GA",
    ], "fr_CM"),
    # Americas
    _c("MXN", "Mexican Peso", "$", 2, ["MX"], "es_MX"),
    _c("BRL", "Brazilian Real", "R$", 2, ["BR"], "pt_BR"),
    _c("ARS", "Argentine Peso", "$", 2, ["AR"], "es_AR"),
    _c("CLP", "Chilean Peso", "$", 0, ["CL"], "es_CL"),
    _c("COP", "Colombian Peso", "$", 2, ["CO"], "es_CO"),
    _c("PEN", "Peruvian Sol", "S/", 2, ["PE"], "es_PE"),
    _c("UYU", "Uruguayan Peso", "$U", 2, ["UY"], "es_UY"),
    _c("BOB", "Bolivian Boliviano", "Bs", 2, ["BO"], "es_BO"),
    _c("PYG", "Paraguayan Guarani", "₲", 0, ["PY"], "es_PY"),
    _c("VES", "Venezuelan Bolivar", "Bs.S", 2, ["VE"], "es_VE"),
    _c("CRC", "Costa Rican Colon", "₡", 2, ["CR"], "es_CR"),
    _c("DOP", "Dominican Peso", "RD$", 2, ["DO"], "es_DO"),
    _c("GTQ", "Guatemalan Quetzal", "Q", 2, ["GT"], "es_GT"),
    _c("JMD", "Jamaican Dollar", "J$", 2, ["JM"], "en_JM"),
    _c("TTD", "Trinidad and Tobago Dollar", "TT$", 2, ["TT"], "en_TT"),
    _c("XCD", "East Caribbean Dollar", "EC$", 2, [
        "AG", "DM", "GD", "KN", "LC", "VC", "AI", "MS",
    ], "en_AG"),
)

_BY_CODE: dict[str, Currency] = {c.code: c for c in SUPPORTED_CURRENCIES}

COUNTRY_CURRENCY_MAP: dict[str, str] = {
    country: currency.code
    for currency in SUPPORTED_CURRENCIES
    for country in currency.countries
}

# Listing-exchange suffix -> trading currency (e.g. "VOD.L" trades in GBP)
MARKET_SUFFIX_CURRENCY_MAP: dict[str, str] = {
    "L": "GBP",     # London Stock Exchange
    "TO": "CAD",    # Toronto Stock Exchange
    "V": "CAD",     # TSX Venture
    "CN": "CAD",    # Canadian Securities Exchange
    "T": "JPY",     # Tokyo Stock Exchange
    "HK": "HKD",    # Hong Kong Stock Exchange
    "AX": "AUD",    # Australian Securities Exchange
    "NZ": "NZD",    # New Zealand Exchange
    "PA": "EUR",    # Euronext Paris
    "DE": "EUR",    # XETRA
    "F": "EUR",     # Frankfurt
    "MI": "EUR",    # Borsa Italiana
    "AS": "EUR",    # Euronext Amsterdam
    "BR": "EUR",    # Euronext Brussels
    "LS": "EUR",    # Euronext Lisbon
    "IR": "EUR",    # Euronext Dublin
    "MC": "EUR",    # Bolsa de Madrid
    "HE": "EUR",    # Nasdaq Helsinki
    "VI": "EUR",    # Wiener Börse
    "SW": "CHF",    # SIX Swiss Exchange
    "ST": "SEK",    # Nasdaq Stockholm
    "OL": "NOK",    # Oslo Stock Exchange
    "CO": "DKK",    # Nasdaq Copenhagen
    "IC": "ISK",    # Nasdaq Iceland
    "WA": "PLN",    # Warsaw Stock Exchange
    "PR": "CZK",    # Prague Stock Exchange
    "BD": "HUF",    # Budapest Stock Exchange
    "IS": "TRY",    # Borsa Istanbul
    "TA": "ILS",    # Tel Aviv Stock Exchange
    "SS": "CNY",    # Shanghai
    "SZ": "CNY",    # Shenzhen
    "TW": "TWD",    # Taiwan Stock Exchange
    "KS": "KRW",    # Korea Exchange (KOSPI)
    "KQ": "KRW",    # KOSDAQ
    "NS": "INR",    # National Stock Exchange of India
    "BO": "INR",    # Bombay Stock Exchange
    "SI": "SGD",    # Singapore Exchange
    "BK": "THB",    # Stock Exchange of Thailand
    "JK": "IDR",    # Indonesia Stock Exchange
    "KL": "MYR",    # Bursa Malaysia
    "SA": "BRL",    # B3 São Paulo
    "MX": "MXN",    # Bolsa Mexicana
    "SN": "CLP",    # Santiago
    "BA": "ARS",    # Buenos Aires
    "JO": "ZAR",    # Johannesburg
    "SR": "SAR",    # Saudi Exchange
    "QA": "QAR",    # Qatar Stock Exchange
}


def normalize_currency_code(code: str) -> str:
    """Uppercase and trim a currency code (no validation)."""
    return code.strip().upper()


def is_valid_currency_code(code: str) -> bool:
    if not isinstance(code, str):
        return False
    return normalize_currency_code(code) in _BY_CODE


def validate_currency_code(code: str) -> str:
    """
    Normalize and validate a currency code.

    Returns:
        The normalized code.

    Raises:
        UnsupportedCurrencyError: If the code is not supported.
    """
    if not isinstance(code, str):
        raise UnsupportedCurrencyError(str(code))
    normalized = normalize_currency_code(code)
    if normalized not in _BY_CODE:
        raise UnsupportedCurrencyError(normalized)
    return normalized


def get_supported_currencies() -> list[Currency]:
    return list(SUPPORTED_CURRENCIES)


def get_currency_info(code: str) -> Currency:
    return _BY_CODE[validate_currency_code(code)]


def get_locale_for_currency(code: str) -> str:
    currency = _BY_CODE.get(normalize_currency_code(code))
    return currency.locale if currency else "en_US"


def detect_currency_from_location(country_code: str) -> str:
    """Map an ISO alpha-2 country code to its currency, USD if unknown."""
    return COUNTRY_CURRENCY_MAP.get(country_code.strip().upper(), DEFAULT_CURRENCY)


def detect_currency_from_market(symbol: str) -> str:
    """
    Infer the trading currency of a ticker symbol.

    "VOD.L" -> GBP, "7203.T" -> JPY, "BTC-EUR" -> EUR, "AAPL" -> USD.
    """
    ticker = symbol.strip().upper()

    if "." in ticker:
        suffix = ticker.rsplit(".", 1)[1]
        if suffix in MARKET_SUFFIX_CURRENCY_MAP:
            return MARKET_SUFFIX_CURRENCY_MAP[suffix]

    # Crypto / FX style pairs quote the currency after the dash
    if "-" in ticker:
        quote = ticker.rsplit("-", 1)[1]
        if quote in _BY_CODE:
            return quote

    return DEFAULT_CURRENCY
