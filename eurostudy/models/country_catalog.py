"""
Bundled destination catalog.

Static reference tables for European study destinations: official visa data,
cost profiles, exchange rates and currencies. Figures are yearly/monthly EUR
estimates and should be confirmed against the linked official sources.
"""

from typing import Optional

from .reference_data import (
    CountryOption,
    CurrencyOption,
    FundingProof,
    OfficialCountryData,
    OneTimeCosts,
    PartTimeWorkProfile,
    RecurringCosts,
    ReferenceDataStore,
    StaticCostProfile,
    TuitionRates,
    WorkRights,
)

EUROPEAN_COUNTRIES = [
    CountryOption(value="Austria", label="🇦🇹 Austria"),
    CountryOption(value="Belgium", label="🇧🇪 Belgium"),
    CountryOption(value="Bulgaria", label="🇧🇬 Bulgaria"),
    CountryOption(value="Croatia", label="🇭🇷 Croatia"),
    CountryOption(value="Cyprus", label="🇨🇾 Cyprus"),
    CountryOption(value="Czech Republic", label="🇨🇿 Czech Republic"),
    CountryOption(value="Denmark", label="🇩🇰 Denmark"),
    CountryOption(value="Estonia", label="🇪🇪 Estonia"),
    CountryOption(value="Finland", label="🇫🇮 Finland"),
    CountryOption(value="France", label="🇫🇷 France"),
    CountryOption(value="Germany", label="🇩🇪 Germany"),
    CountryOption(value="Greece", label="🇬🇷 Greece"),
    CountryOption(value="Hungary", label="🇭🇺 Hungary"),
    CountryOption(value="Ireland", label="🇮🇪 Ireland"),
    CountryOption(value="Italy", label="🇮🇹 Italy"),
    CountryOption(value="Latvia", label="🇱🇻 Latvia"),
    CountryOption(value="Lithuania", label="🇱🇹 Lithuania"),
    CountryOption(value="Luxembourg", label="🇱🇺 Luxembourg"),
    CountryOption(value="Malta", label="🇲🇹 Malta"),
    CountryOption(value="Netherlands", label="🇳🇱 Netherlands"),
    CountryOption(value="Norway", label="🇳🇴 Norway"),
    CountryOption(value="Poland", label="🇵🇱 Poland"),
    CountryOption(value="Portugal", label="🇵🇹 Portugal"),
    CountryOption(value="Romania", label="🇷🇴 Romania"),
    CountryOption(value="Slovakia", label="🇸🇰 Slovakia"),
    CountryOption(value="Slovenia", label="🇸🇮 Slovenia"),
    CountryOption(value="Spain", label="🇪🇸 Spain"),
    CountryOption(value="Sweden", label="🇸🇪 Sweden"),
    CountryOption(value="Switzerland", label="🇨🇭 Switzerland"),
    CountryOption(value="United Kingdom", label="🇬🇧 United Kingdom"),
]

SUPPORTED_CURRENCIES = [
    CurrencyOption(code="EUR", symbol="€", label="Euro (EUR)"),
    CurrencyOption(code="USD", symbol="$", label="US Dollar (USD)"),
    CurrencyOption(code="GBP", symbol="£", label="British Pound (GBP)"),
    CurrencyOption(code="INR", symbol="₹", label="Indian Rupee (INR)"),
    CurrencyOption(code="PKR", symbol="Rs", label="Pakistani Rupee (PKR)"),
    CurrencyOption(code="NGN", symbol="₦", label="Nigerian Naira (NGN)"),
]

DEFAULT_EXCHANGE_RATES = {
    "EUR": 1.0,
    "USD": 1.08,
    "GBP": 0.85,
    "INR": 90.5,
    "PKR": 300.5,
    "NGN": 1600.0,
}

# Countries whose visa requires a frozen deposit rather than a bank statement
BLOCKED_ACCOUNT_COUNTRIES = [
    "Germany",
    "Austria",
    "Netherlands",
    "Finland",
    "Denmark",
    "Norway",
    "Sweden",
    "Switzerland",
]


def _official(
    country: str,
    method: str,
    amount: float,
    details: str,
    link: str,
    visa_fee: float,
    max_hours: str,
    notes: str,
    allowed: bool = True,
) -> OfficialCountryData:
    return OfficialCountryData(
        country=country,
        funding_proof=FundingProof(
            preferred_method=method,
            amount_euro=amount,
            details=details,
            official_link=link,
        ),
        visa_fee_euro=visa_fee,
        work_rights=WorkRights(allowed=allowed, max_hours=max_hours, notes=notes),
    )


OFFICIAL_COUNTRY_DATA = {
    "Germany": _official(
        "Germany",
        "Blocked Account (Sperrkonto)",
        11208,
        "Must deposit €11,208/yr (~€934/mo) into a blocked account.",
        "https://www.auswaertiges-amt.de/en/visa-service/visabestimmungen-node/sperrkonto-seite",
        75,
        "120 full days / 240 half days per year",
        "Approx 20h/week. Self-employment restricted.",
    ),
    "Austria": _official(
        "Austria",
        "Bank Statement / Deposit",
        13000,
        "Under 24: ~€670/mo. Over 24: ~€1,100/mo. Access to funds required.",
        "https://oead.at/en/to-austria/entry-and-residence",
        160,
        "20 hours per week",
        "Requires a work permit (AMS) from the employer.",
    ),
    "Netherlands": _official(
        "Netherlands",
        "University Transfer / Deposit",
        14616,
        "University applies for you. Proof of ~€1,218/mo required.",
        "https://ind.nl/en/residence-permits/study/study-at-university-or-higher-professional-education",
        210,
        "16 hours per week",
        "Employer needs work permit (TWV). Internship pay often tax-free.",
    ),
    "France": _official(
        "France",
        "Bank Statement",
        7380,
        "Must prove minimum €615/month for the year.",
        "https://france-visas.gouv.fr/en_US/web/france-visas",
        99,
        "964 hours per year",
        "Can work 60% of legal year (~20h/week).",
    ),
    "Ireland": _official(
        "Ireland",
        "Education Bond / Bank Statement",
        10000,
        "Access to €10,000 + proof of fees paid.",
        "https://www.irishimmigration.ie/coming-to-study-in-ireland/",
        100,
        "20h/week term-time, 40h/week holidays",
        "Automatic right to work for degree students.",
    ),
    "Belgium": _official(
        "Belgium",
        "Solvency / Financial Proof",
        10000,
        "Proof of solvency required. Approx €830/month + fees.",
        "https://dofi.ibz.be/en",
        180,
        "20h/week",
        "Allowed during semester. Unlimited during holidays.",
    ),
    "Spain": _official(
        "Spain",
        "Bank Statement",
        7200,
        "100% of IPREM index (approx €600/mo).",
        "https://www.exteriores.gob.es/Consulados/londres/en/ServiciosConsulares/Paginas/Consular/Visado-de-estudios.aspx",
        80,
        "30 hours per week",
        "Work must not overlap with study hours.",
    ),
    "Italy": _official(
        "Italy",
        "Bank Statement",
        6500,
        "Min €6,500/year (~€540/mo).",
        "https://vistoperitalia.esteri.it/home/en",
        50,
        "20 hours per week",
        "Max 1,040 hours per year.",
    ),
    "Poland": _official(
        "Poland",
        "Bank Statement / Traveller Cheques",
        8500,
        "Cost of living (~776 PLN/mo) + Return ticket + Rent.",
        "https://www.gov.pl/web/diplomacy/visas",
        80,
        "Unlimited",
        "Full-time students with residency permit can work without permit.",
    ),
    "Portugal": _official(
        "Portugal",
        "Bank Statement",
        9840,
        "Based on minimum wage (~€820x12).",
        "https://imigrante.sef.pt/en/solicitar/estudar/",
        90,
        "20 hours per week",
        "Need to notify SEF.",
    ),
    "Czech Republic": _official(
        "Czech Republic",
        "Bank Statement",
        5000,
        "Approx 110,000 CZK per year.",
        "https://www.mvcr.cz/mvcren/article/proof-of-funds-for-the-purposes-of-a-long-term-residence.aspx",
        100,
        "Unlimited",
        "If enrolled in accredited university program.",
    ),
    "Hungary": _official(
        "Hungary",
        "Bank Statement",
        3000,
        "Must show access to funds for duration. ~€250/mo minimum.",
        "http://www.bmbah.hu/index.php?lang=en",
        60,
        "24 hours per week",
        "30h/week (term time), 66 days/yr outside term.",
    ),
    "Sweden": _official(
        "Sweden",
        "Bank Statement (Deposit)",
        10000,
        "Must show ~9,450 SEK/month for duration.",
        "https://www.migrationsverket.se/English/Private-individuals/Studying-in-Sweden.html",
        140,
        "Unlimited",
        "As long as studies are the main focus.",
    ),
    "Finland": _official(
        "Finland",
        "Bank Statement (Deposit)",
        6720,
        "€560 per month for the year.",
        "https://migri.fi/en/studying-in-finland",
        350,
        "30 hours per week",
        "Increased from 25h to 30h recently.",
    ),
    "Norway": _official(
        "Norway",
        "Deposit in Norwegian Bank",
        13500,
        "Must transfer ~151,690 NOK to a Norwegian account.",
        "https://www.udi.no/en/want-to-apply/studies/",
        540,
        "20 hours per week",
        "Full-time during holidays.",
    ),
    "Denmark": _official(
        "Denmark",
        "Bank Statement",
        11000,
        "Equivalent of ~€900/month.",
        "https://www.nyidanmark.dk/en-GB",
        255,
        "20 hours per week",
        "Full-time during June, July, August.",
    ),
    "Switzerland": _official(
        "Switzerland",
        "Bank Statement (Swiss Bank)",
        22000,
        "CHF 21,000 at start of year.",
        "https://www.ch.ch/en/foreign-nationals-in-switzerland/entry-and-stay/visa-procedure-entry/",
        80,
        "15 hours per week",
        "Only after 6 months for non-EU students.",
    ),
    # Approx £9,207 outside London, £12,006 London; visa fee £490
    "United Kingdom": _official(
        "United Kingdom",
        "Bank Statement",
        12000,
        "Min £1,023/mo (outside London) or £1,334/mo (London) for 9 months.",
        "https://www.gov.uk/student-visa/money",
        575,
        "20 hours per week",
        "Term-time. Full-time during vacations.",
    ),
}


def _profile(
    tuition: TuitionRates,
    one_time: OneTimeCosts,
    recurring: RecurringCosts,
    work: PartTimeWorkProfile,
    highlights: list,
    description: str,
    housing_range: str,
) -> StaticCostProfile:
    return StaticCostProfile(
        tuition_yearly=tuition,
        one_time_costs=one_time,
        recurring_costs=recurring,
        part_time_work=work,
        highlights=highlights,
        description=description,
        housing_range=housing_range,
    )


STATIC_COST_PROFILES = {
    "Austria": _profile(
        TuitionRates(
            eu=42,
            non_eu=1453,
            details="EU: ~€21/sem. Non-EU: ~€726.72/sem (Public).",
        ),
        OneTimeCosts(
            visa_admin=160,
            blocked_account=0,
            flight_travel=350,
            tests_admissions=150,
            deposit=1000,
        ),
        RecurringCosts(
            housing_monthly=550,
            insurance_monthly=65,
            food_monthly=300,
            transport_monthly=50,
            misc_monthly=150,
        ),
        PartTimeWorkProfile(
            regulations="20 hours/week allowed",
            min_wage=11,
            avg_student_wage=14,
            max_hours_eu=40,
            max_hours_non_eu=20,
        ),
        [
            "High quality of life",
            "Central European location",
            "Affordable student housing",
            "Strong public universities",
        ],
        "Quality of life is high with affordable public university fees.",
        "€350–€800/mo",
    ),
    "Germany": _profile(
        TuitionRates(
            eu=350,
            non_eu=350,
            details=(
                "Mostly free (Semester contribution ~€150-350/sem). "
                "BW charges Non-EU €3,000/yr."
            ),
        ),
        OneTimeCosts(
            visa_admin=75,
            blocked_account=11208,
            flight_travel=400,
            tests_admissions=200,
            deposit=1200,
        ),
        RecurringCosts(
            housing_monthly=500,
            insurance_monthly=120,
            food_monthly=250,
            transport_monthly=30,
            misc_monthly=200,
        ),
        PartTimeWorkProfile(
            regulations="20h/week (120 full days) allowed",
            min_wage=12.41,
            avg_student_wage=13.50,
            max_hours_eu=40,
            max_hours_non_eu=20,
        ),
        [
            "Tuition-free public universities",
            "Strong economy",
            "Post-study work visa (18 months)",
            "Diverse international community",
        ],
        "A top destination known for free tuition and engineering excellence.",
        "€400–€900/mo",
    ),
    "Netherlands": _profile(
        TuitionRates(
            eu=2530,
            non_eu=12000,
            details="EU: ~€2,530. Non-EU: €6k - €20k depending on course.",
        ),
        OneTimeCosts(
            visa_admin=210,
            blocked_account=0,
            flight_travel=350,
            tests_admissions=250,
            deposit=1500,
        ),
        RecurringCosts(
            housing_monthly=800,
            insurance_monthly=100,
            food_monthly=300,
            transport_monthly=80,
            misc_monthly=250,
        ),
        PartTimeWorkProfile(
            regulations="16 hours/week allowed for Non-EU",
            min_wage=13.27,
            avg_student_wage=15,
            max_hours_eu=40,
            max_hours_non_eu=16,
        ),
        [
            "English widely spoken",
            "Innovative teaching methods",
            "Cycling culture",
            "High post-grad salaries",
        ],
        "High English proficiency and vibrant international student life.",
        "€500–€1100/mo",
    ),
    "France": _profile(
        TuitionRates(
            eu=170,
            non_eu=2770,
            details="EU: ~€170. Non-EU: €2,770 (Bachelor), €3,770 (Master).",
        ),
        OneTimeCosts(
            visa_admin=99,
            blocked_account=0,
            flight_travel=350,
            tests_admissions=250,
            deposit=900,
        ),
        RecurringCosts(
            housing_monthly=600,
            insurance_monthly=0,
            food_monthly=300,
            transport_monthly=40,
            misc_monthly=180,
        ),
        PartTimeWorkProfile(
            regulations="964 hours/year allowed (60%)",
            min_wage=11.65,
            avg_student_wage=12.50,
            max_hours_eu=40,
            max_hours_non_eu=20,
        ),
        [
            "Rich culture & history",
            "Housing subsidy (CAF)",
            "Grandes Écoles system",
            "Central Europe travel hub",
        ],
        "Affordable education with unique housing subsidies for students.",
        "€400–€900/mo",
    ),
    "Italy": _profile(
        TuitionRates(
            eu=1500,
            non_eu=2000,
            details="Based on family income (ISEE). Ranges €0–€4,000/yr.",
        ),
        OneTimeCosts(
            visa_admin=50,
            blocked_account=0,
            flight_travel=350,
            tests_admissions=150,
            deposit=800,
        ),
        RecurringCosts(
            housing_monthly=500,
            insurance_monthly=50,
            food_monthly=250,
            transport_monthly=35,
            misc_monthly=150,
        ),
        PartTimeWorkProfile(
            regulations="20 hours/week (1040h/yr)",
            min_wage=9,
            avg_student_wage=10,
            max_hours_eu=40,
            max_hours_non_eu=20,
        ),
        [
            "Historic universities",
            "Amazing cuisine",
            "Scholarship opportunities (DSU)",
            "Rich art & culture",
        ],
        "Study amidst history with generous regional scholarships.",
        "€300–€700/mo",
    ),
    "Spain": _profile(
        TuitionRates(
            eu=1200,
            non_eu=2500,
            details="Public unis: €700-€3,500/yr. Non-EU may pay higher rates.",
        ),
        OneTimeCosts(
            visa_admin=80,
            blocked_account=0,
            flight_travel=350,
            tests_admissions=150,
            deposit=800,
        ),
        RecurringCosts(
            housing_monthly=500,
            insurance_monthly=60,
            food_monthly=250,
            transport_monthly=30,
            misc_monthly=180,
        ),
        PartTimeWorkProfile(
            regulations="30 hours/week allowed",
            min_wage=8.87,
            avg_student_wage=10,
            max_hours_eu=40,
            max_hours_non_eu=30,
        ),
        [
            "Warm climate",
            "Vibrant social life",
            "Affordable living",
            "Spanish language immersion",
        ],
        "A vibrant destination with affordable living and great weather.",
        "€300–€800/mo",
    ),
    "Poland": _profile(
        TuitionRates(
            eu=0,
            non_eu=3000,
            details="EU: Free (Polish courses). Non-EU: €2k-€4k/yr.",
        ),
        OneTimeCosts(
            visa_admin=80,
            blocked_account=0,
            flight_travel=300,
            tests_admissions=150,
            deposit=600,
        ),
        RecurringCosts(
            housing_monthly=350,
            insurance_monthly=40,
            food_monthly=200,
            transport_monthly=20,
            misc_monthly=120,
        ),
        PartTimeWorkProfile(
            regulations="Unlimited for residents",
            min_wage=6.5,
            avg_student_wage=7.5,
            max_hours_eu=40,
            max_hours_non_eu=40,
        ),
        ["Very affordable", "Modern cities", "Growing tech hub", "Rich history"],
        "One of the most affordable countries in Europe with high educational standards.",
        "€200–€500/mo",
    ),
    "Ireland": _profile(
        TuitionRates(
            eu=3000,
            non_eu=15000,
            details="EU: €3k contribution. Non-EU: €10k-€25k.",
        ),
        OneTimeCosts(
            visa_admin=100,
            blocked_account=0,
            flight_travel=300,
            tests_admissions=200,
            deposit=1200,
        ),
        RecurringCosts(
            housing_monthly=900,
            insurance_monthly=50,
            food_monthly=300,
            transport_monthly=60,
            misc_monthly=200,
        ),
        PartTimeWorkProfile(
            regulations="20h/week (term), 40h (holiday)",
            min_wage=12.70,
            avg_student_wage=13.50,
            max_hours_eu=40,
            max_hours_non_eu=20,
        ),
        [
            "English speaking",
            "Tech headquarters of Europe",
            "Friendly population",
            "2-year post-study visa",
        ],
        "English-speaking hub with major career opportunities in tech and pharma.",
        "€600–€1200/mo",
    ),
    "Sweden": _profile(
        TuitionRates(
            eu=0,
            non_eu=12000,
            details="EU: Free. Non-EU: SEK 80k-140k/yr.",
        ),
        OneTimeCosts(
            visa_admin=140,
            blocked_account=0,
            flight_travel=300,
            tests_admissions=100,
            deposit=1000,
        ),
        RecurringCosts(
            housing_monthly=550,
            insurance_monthly=50,
            food_monthly=300,
            transport_monthly=60,
            misc_monthly=200,
        ),
        PartTimeWorkProfile(
            regulations="Unlimited work allowed",
            min_wage=12,
            avg_student_wage=14,
            max_hours_eu=40,
            max_hours_non_eu=40,
        ),
        [
            "Innovation leader",
            "English widely spoken",
            "Work-life balance",
            "Beautiful nature",
        ],
        "Innovative society with unlimited work rights for students.",
        "€400–€800/mo",
    ),
    "Switzerland": _profile(
        TuitionRates(
            eu=1500,
            non_eu=1500,
            details="Public unis are cheap for all (~CHF 1500). Private are expensive.",
        ),
        OneTimeCosts(
            visa_admin=80,
            blocked_account=0,
            flight_travel=300,
            tests_admissions=200,
            deposit=2000,
        ),
        RecurringCosts(
            housing_monthly=1200,
            insurance_monthly=250,
            food_monthly=500,
            transport_monthly=100,
            misc_monthly=400,
        ),
        PartTimeWorkProfile(
            regulations="15h/week after 6mo",
            min_wage=24,
            avg_student_wage=28,
            max_hours_eu=40,
            max_hours_non_eu=15,
        ),
        [
            "Highest salaries",
            "Top global universities",
            "Stunning landscapes",
            "High quality of life",
        ],
        "Premium education with the highest living standards in Europe.",
        "€800–€1800/mo",
    ),
    "United Kingdom": _profile(
        TuitionRates(
            eu=16000,
            non_eu=18000,
            details="EU/Intl: £14k-£26k. Home fee status lost after Brexit.",
        ),
        OneTimeCosts(
            visa_admin=575,
            blocked_account=0,
            flight_travel=400,
            tests_admissions=250,
            deposit=1500,
        ),
        RecurringCosts(
            housing_monthly=900,
            insurance_monthly=80,
            food_monthly=350,
            transport_monthly=80,
            misc_monthly=300,
        ),
        PartTimeWorkProfile(
            regulations="20 hours/week",
            min_wage=11.44,
            avg_student_wage=12.50,
            max_hours_eu=40,
            max_hours_non_eu=20,
        ),
        [
            "World class universities",
            "Short masters (1 year)",
            "Cultural powerhouse",
            "English language",
        ],
        "Prestigious education with shorter Master degrees (1 year).",
        "£600–€1200/mo",
    ),
    "default": _profile(
        TuitionRates(
            eu=1000,
            non_eu=5000,
            details="Varies significantly by institution.",
        ),
        OneTimeCosts(
            visa_admin=100,
            blocked_account=0,
            flight_travel=300,
            tests_admissions=200,
            deposit=800,
        ),
        RecurringCosts(
            housing_monthly=500,
            insurance_monthly=60,
            food_monthly=300,
            transport_monthly=40,
            misc_monthly=150,
        ),
        PartTimeWorkProfile(
            regulations="20 hours/week typically",
            min_wage=10,
            avg_student_wage=11,
            max_hours_eu=40,
            max_hours_non_eu=20,
        ),
        [
            "European culture",
            "Travel opportunities",
            "Diverse education",
            "Student friendly",
        ],
        "A great study destination with access to the broader European network.",
        "€300–€700/mo",
    ),
}


def create_reference_data() -> ReferenceDataStore:
    """
    Build the reference data store from the bundled catalog.

    Returns:
        ReferenceDataStore with all bundled tables
    """
    return ReferenceDataStore(
        official_data=OFFICIAL_COUNTRY_DATA,
        cost_profiles=STATIC_COST_PROFILES,
        exchange_rates=DEFAULT_EXCHANGE_RATES,
        currencies=SUPPORTED_CURRENCIES,
        blocked_account_countries=BLOCKED_ACCOUNT_COUNTRIES,
        countries=EUROPEAN_COUNTRIES,
    )


# Read-only, shared across calls
_reference_data: Optional[ReferenceDataStore] = None


def get_reference_data() -> ReferenceDataStore:
    """Get or create the shared bundled reference data store."""
    global _reference_data
    if _reference_data is None:
        _reference_data = create_reference_data()
    return _reference_data
