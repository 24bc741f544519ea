"""Built-in unit definitions, grouped by topic.

Each entry gives a singular name, a plural name (empty when the plural is
the same as the singular), a definition and an optional description.

A definition may start with a prefix rule marker:

* ``l@``  - long prefixes such as ``kilo`` may be applied
* ``lp@`` - the unit is itself a long prefix
* ``s@``  - short prefixes such as ``k`` may be applied
* ``sp@`` - the unit is itself a short prefix

After the marker, ``!`` declares a new base unit, a leading ``=`` marks an
alias, and ``$CURRENCY`` marks a currency whose value comes from an
exchange-rate source.
"""

from __future__ import annotations

from typing import NamedTuple


class UnitTuple(NamedTuple):
    """One row of the built-in unit table."""

    singular: str
    plural: str
    definition: str
    description: str = ""


_U = UnitTuple

BASE_UNITS: tuple[UnitTuple, ...] = (
    _U("second", "seconds", "l@!"),
    _U("meter", "meters", "l@!"),
    _U("kilogram", "kilograms", "l@!"),
    _U("kelvin", "", "l@!"),
    _U("ampere", "amperes", "l@!"),
    _U("mole", "moles", "l@!"),
    _U("candela", "candelas", "l@!"),
    _U("neper", "nepers", "l@!"),
)

BASE_UNIT_ABBREVIATIONS: tuple[UnitTuple, ...] = (
    _U("s", "", "s@second"),
    _U("metre", "metres", "l@meter"),
    _U("m", "", "s@meter"),
    _U("gram", "grams", "l@1/1000 kilogram"),
    _U("jin", "jin", "l@1/2 kilogram"),
    _U("g", "", "s@gram"),
    _U("K", "", "s@kelvin"),
    _U("\u00b0K", "", "=K"),
    _U("amp", "amps", "l@ampere"),
    _U("A", "", "s@ampere"),
    _U("mol", "", "s@mole"),
    _U("cd", "", "s@candela"),
    _U("Np", "", "s@neper"),
)

# some temperature scales have special support for conversions
TEMPERATURE_SCALES: tuple[UnitTuple, ...] = (
    _U("celsius", "", "l@!"),
    _U("\u00b0C", "", "celsius"),
    _U("oC", "", "=\u00b0C"),
    _U("rankine", "", "l@5/9 K"),
    _U("\u00b0R", "", "rankine"),
    _U("fahrenheit", "", "l@!"),
    _U("\u00b0F", "", "fahrenheit"),
    _U("oF", "", "=\u00b0F"),
)

BITS_AND_BYTES: tuple[UnitTuple, ...] = (
    _U("bit", "bits", "l@!"),
    _U("bps", "", "s@bits/second"),
    _U("byte", "bytes", "l@8 bits"),
    _U("b", "", "s@bit"),
    _U("B", "", "s@byte"),
    _U("octet", "octets", "l@8 bits"),
)

STANDARD_PREFIXES: tuple[UnitTuple, ...] = (
    _U("quecca", "", "lp@1e30"),
    _U("ronna", "", "lp@1e27"),
    _U("yotta", "", "lp@1e24"),
    _U("zetta", "", "lp@1e21"),
    _U("exa", "", "lp@1e18"),
    _U("peta", "", "lp@1e15"),
    _U("tera", "", "lp@1e12"),
    _U("giga", "", "lp@1e9"),
    _U("mega", "", "lp@1e6"),
    _U("myria", "", "lp@1e4"),
    _U("kilo", "", "lp@1e3"),
    _U("hecto", "", "lp@1e2"),
    _U("deca", "", "lp@1e1"),
    _U("deka", "", "lp@deca"),
    _U("deci", "", "lp@1e-1"),
    _U("centi", "", "lp@1e-2"),
    _U("milli", "", "lp@1e-3"),
    _U("micro", "", "lp@1e-6"),
    _U("nano", "", "lp@1e-9"),
    _U("pico", "", "lp@1e-12"),
    _U("femto", "", "lp@1e-15"),
    _U("atto", "", "lp@1e-18"),
    _U("zepto", "", "lp@1e-21"),
    _U("yocto", "", "lp@1e-24"),
    _U("ronto", "", "lp@1e-27"),
    _U("quecto", "", "lp@1e-30"),
    _U("k", "", "=1000"),
    _U("M", "", "=1,000,000"),
    _U("G", "", "=1,000,000,000"),
    _U("T", "", "=1,000,000,000,000"),
)

NON_STANDARD_PREFIXES: tuple[UnitTuple, ...] = (
    _U("quarter", "", "lp@1/4"),
    _U("semi", "", "lp@0.5"),
    _U("demi", "", "lp@0.5"),
    _U("hemi", "", "lp@0.5"),
    _U("half", "", "lp@0.5"),
    _U("double", "", "lp@2"),
    _U("triple", "", "lp@3"),
    _U("treble", "", "lp@3"),
)

BINARY_PREFIXES: tuple[UnitTuple, ...] = (
    _U("kibi", "", "lp@2^10"),
    _U("mebi", "", "lp@2^20"),
    _U("gibi", "", "lp@2^30"),
    _U("tebi", "", "lp@2^40"),
    _U("pebi", "", "lp@2^50"),
    _U("exbi", "", "lp@2^60"),
    _U("zebi", "", "lp@2^70"),
    _U("yobi", "", "lp@2^80"),
    _U("Ki", "", "=2^10"),
    _U("Mi", "", "=2^20"),
    _U("Gi", "", "=2^30"),
    _U("Ti", "", "=2^40"),
)

NUMBER_WORDS: tuple[UnitTuple, ...] = (
    _U("tithe", "", "=1/10"),
    _U("one", "", "=1"),
    _U("two", "", "=2"),
    _U("couple", "", "=2"),
    _U("three", "", "=3"),
    _U("four", "", "=4"),
    _U("quadruple", "", "=4"),
    _U("five", "", "=5"),
    _U("quintuple", "", "=5"),
    _U("six", "", "=6"),
    _U("seven", "", "=7"),
    _U("eight", "", "=8"),
    _U("nine", "", "=9"),
    _U("ten", "", "=10"),
    _U("eleven", "", "=11"),
    _U("twelve", "", "=12"),
    _U("dozen", "", "=12"),
    _U("thirteen", "", "=13"),
    _U("bakersdozen", "", "=13"),
    _U("fourteen", "", "=14"),
    _U("fifteen", "", "=15"),
    _U("sixteen", "", "=16"),
    _U("seventeen", "", "=17"),
    _U("eighteen", "", "=18"),
    _U("nineteen", "", "=19"),
    _U("twenty", "", "=20"),
    _U("score", "", "=20"),
    _U("thirty", "", "=30"),
    _U("forty", "", "=40"),
    _U("fifty", "", "=50"),
    _U("sixty", "", "=60"),
    _U("seventy", "", "=70"),
    _U("eighty", "", "=80"),
    _U("ninety", "", "=90"),
    _U("hundred", "", "=100"),
    _U("gross", "", "=144"),
    _U("greatgross", "", "=12 gross"),
    _U("thousand", "", "=1000"),
    _U("million", "", "=1e6"),
    _U("billion", "", "=1e9"),
    _U("trillion", "", "=1e12"),
    _U("quadrillion", "", "=1e15"),
    _U("quintillion", "", "=1e18"),
    _U("sextillion", "", "=1e21"),
    _U("septillion", "", "=1e24"),
    _U("octillion", "", "=1e27"),
    _U("nonillion", "", "=1e30"),
    _U("decillion", "", "=1e33"),
    _U("undecillion", "", "=1e36"),
    _U("duodecillion", "", "=1e39"),
    _U("tredecillion", "", "=1e42"),
    _U("quattuordecillion", "", "=1e45"),
    _U("quindecillion", "", "=1e48"),
    _U("sexdecillion", "", "=1e51"),
    _U("septendecillion", "", "=1e54"),
    _U("octodecillion", "", "=1e57"),
    _U("novemdecillion", "", "=1e60"),
    _U("vigintillion", "", "=1e63"),
    _U("unvigintillion", "", "=1e66"),
    _U("duovigintillion", "", "=1e69"),
    _U("trevigintillion", "", "=1e72"),
    _U("quattuorvigintillion", "", "=1e75"),
    _U("quinvigintillion", "", "=1e78"),
    _U("sexvigintillion", "", "=1e81"),
    _U("septenvigintillion", "", "=1e84"),
    _U("octovigintillion", "", "=1e87"),
    _U("novemvigintillion", "", "=1e90"),
    _U("trigintillion", "", "=1e93"),
    _U("untrigintillion", "", "=1e96"),
    _U("duotrigintillion", "", "=1e99"),
    _U("googol", "", "=1e100"),
    _U("tretrigintillion", "", "=1e102"),
    _U("quattuortrigintillion", "", "=1e105"),
    _U("quintrigintillion", "", "=1e108"),
    _U("sextrigintillion", "", "=1e111"),
    _U("septentrigintillion", "", "=1e114"),
    _U("octotrigintillion", "", "=1e117"),
    _U("novemtrigintillion", "", "=1e120"),
    _U("centillion", "", "=1e303"),
)

CONSTANTS: tuple[UnitTuple, ...] = (
    _U("c", "", "=299792458 m/s", "speed of light in vacuum (exact)"),
    _U("planck", "", "=6.62607015e-34 J s", "Planck constant (exact)"),
    _U("boltzmann", "", "=1.380649e-23 J/K", "Boltzmann constant (exact)"),
    _U(
        "electron_charge",
        "",
        "=1.602176634e-19 coulomb",
        "electron charge (exact)",
    ),
    _U("avogadro", "", "=6.02214076e23 / mol", "size of a mole (exact)"),
    _U("N_A", "", "=avogadro"),
    _U(
        "gravitational_constant",
        "",
        "=6.67430e-11 N m^2 / kg^2",
        "gravitational constant",
    ),
    _U("gravity", "", "=9.80665 m/s^2"),
    _U("force", "", "gravity"),  # used to convert some units
)

ANGLES: tuple[UnitTuple, ...] = (
    _U("radian", "radians", "l@1"),
    _U("rad", "", "radian"),
    _U("circle", "circles", "l@2 pi radian"),
    _U("degree", "degrees", "l@1/360 circle"),
    _U("deg", "degs", "l@degree"),
    _U("\u00b0", "", "degree"),
    _U("arcdeg", "arcdegs", "degree"),
    _U("arcmin", "arcmins", "l@1/60 degree"),
    _U("arcminute", "arcminutes", "l@arcmin"),
    _U("arcsec", "arcsecs", "l@1/60 arcmin"),
    _U("arcsecond", "arcseconds", "l@arcsec"),
    _U("rightangle", "rightangles", "l@90 degrees"),
    _U("quadrant", "quadrants", "l@1/4 circle"),
    _U("quintant", "quintants", "l@1/5 circle"),
    _U("sextant", "sextants", "l@1/6 circle"),
    _U(
        "zodiac_sign",
        "zodiac_signs",
        "l@1/12 circle",
        "Angular extent of one sign of the zodiac",
    ),
    _U("turn", "turns", "l@circle"),
    _U("revolution", "revolutions", "l@circle"),
    _U("rev", "revs", "l@circle"),
    _U("gradian", "gradians", "l@1/100 rightangle"),
    _U("gon", "gons", "l@gradian"),
    _U("grad", "", "l@gradian"),
    _U("mas", "", "milliarcsec"),
)

SOLID_ANGLES: tuple[UnitTuple, ...] = (
    _U("steradian", "steradians", "l@1"),
    _U("sr", "sr", "s@steradian"),
    _U("sphere", "spheres", "4 pi steradians"),
    _U("squaredegree", "squaredegrees", "(1/180)^2 pi^2 steradians"),
    _U("squareminute", "squareminutes", "(1/60)^2 squaredegree"),
    _U("squaresecond", "squareseconds", "(1/60)^2 squareminute"),
    _U("squarearcmin", "squarearcmins", "squareminute"),
    _U("squarearcsec", "squarearcsecs", "squaresecond"),
    _U("sphericalrightangle", "sphericalrightangles", "0.5 pi steradians"),
    _U("octant", "octants", "0.5 pi steradians"),
)

COMMON_SI_DERIVED_UNITS: tuple[UnitTuple, ...] = (
    _U("newton", "newtons", "l@kg m / s^2", "force"),
    _U("N", "", "s@newton"),
    _U("pascal", "pascals", "l@N/m^2", "pressure or stress"),
    _U("Pa", "", "s@pascal"),
    _U("joule", "joules", "l@N m", "energy"),
    _U("J", "", "s@joule"),
    _U("watt", "watts", "l@J/s", "power"),
    _U("W", "", "s@watt"),
    _U("horsepower", "horsepowers", "l@745.699987158227022 watts"),
    _U("hp", "", "s@horsepower"),
    _U("coulomb", "", "l@A s", "charge"),
    _U("C", "", "s@coulomb"),
    _U("volt", "volts", "l@W/A", "potential difference"),
    _U("V", "", "s@volt"),
    _U("Ah", "", "s@ampere hour"),
    _U("ohm", "ohms", "l@V/A", "electrical resistance"),
    _U("siemens", "", "l@A/V", "electrical conductance"),
    _U("S", "", "s@siemens"),
    _U("farad", "", "l@coulomb/V", "capacitance"),
    _U("F", "", "s@farad"),
    _U("weber", "", "l@V s", "magnetic flux"),
    _U("Wb", "", "s@weber"),
    _U("henry", "", "l@V s / A", "inductance"),
    _U("H", "", "s@henry"),
    _U("tesla", "", "l@Wb/m^2", "magnetic flux density"),
    _U("T", "", "s@tesla"),
    _U("hertz", "", "l@/s", "frequency"),
    _U("Hz", "", "s@hertz"),
    _U("nit", "nits", "l@candela / meter^2", "luminance"),
    _U("nt", "", "nit"),
    _U("lumen", "lumens", "l@cd sr", "luminous flux"),
    _U("lm", "", "s@lumen"),
    _U("lux", "", "l@lm/m^2", "illuminance"),
    _U("lx", "", "lux", "illuminance"),
    _U("phot", "phots", "l@1e4 lx"),
    _U("ph", "", "s@phot"),
    _U("becquerel", "becquerels", "l@/s", "radioactivity"),
    _U("Bq", "", "s@becquerel"),
    _U("curie", "curies", "l@3.7e10 Bq"),
    _U("Ci", "", "s@curie"),
    _U("rutherford", "rutherfords", "l@1e6 Bq"),
    _U("Rd", "", "s@rutherford"),
    _U("gray", "grays", "l@J/kg", "absorbed dose of ionising radiation"),
    _U("Gy", "", "s@gray"),
    _U("rad_radiation", "", "l@1/100 Gy"),
    _U(
        "sievert",
        "sieverts",
        "l@J / kg",
        "equivalent dose of ionising radiation",
    ),
    _U("Sv", "", "s@sievert"),
    _U("rem", "", "l@1/100 Sv"),
    _U("roentgen", "roentgens", "l@0.000258 coulomb/kg"),
    _U("R", "", "s@roentgen"),
)

TIME_UNITS: tuple[UnitTuple, ...] = (
    _U("sec", "secs", "s@second"),
    _U("minute", "minutes", "l@60 seconds"),
    _U("min", "mins", "s@minute"),
    _U("hour", "hours", "l@60 minutes"),
    _U("hr", "hrs", "s@hour"),
    _U("h", "h", "s@hour"),
    _U("day", "days", "l@24 hours"),
    _U("d", "", "s@day"),
    _U("da", "", "s@day"),
    _U("week", "weeks", "l@7 days"),
    _U("wk", "", "s@week"),
    _U("fortnight", "fortnights", "l@14 day"),
    _U(
        "sidereal_year",
        "sidereal_years",
        "365.256363004 days",
        "the time taken for the Earth to complete one revolution of its orbit, "
        "as measured against a fixed frame of reference (such as the fixed stars, "
        "Latin sidera, singular sidus)",
    ),
    _U(
        "tropical_year",
        "tropical_years",
        "365.242198781 days",
        "the period of time for the mean ecliptic longitude of the Sun "
        "to increase by 360 degrees",
    ),
    _U(
        "anomalistic_year",
        "anomalistic_years",
        "365.259636 days",
        "the time taken for the Earth to complete one revolution "
        "with respect to its apsides",
    ),
    _U("year", "years", "l@tropical_year"),
    _U("yr", "", "year"),
    _U("month", "months", "l@1/12 year"),
    _U("mo", "", "month"),
    _U("decade", "decades", "10 years"),
    _U("century", "centuries", "100 years"),
    _U("millennium", "millennia", "1000 years"),
    _U("solar_year", "solar_years", "year"),
    _U("calendar_year", "calendar_years", "365 days"),
    _U("common_year", "common_years", "365 days"),
    _U("leap_year", "leap_years", "366 days"),
    _U("julian_year", "julian_years", "365.25 days"),
    _U("gregorian_year", "gregorian_years", "365.2425 days"),
    # french revolutionary time
    _U("decimal_hour", "decimal_hours", "l@1/10 day"),
    _U("decimal_minute", "decimal_minutes", "l@1/100 decimal_hour"),
    _U("decimal_second", "decimal_seconds", "l@1/100 decimal_minute"),
    _U("beat", "beats", "l@decimal_minute", "Swatch Internet Time"),
    _U("scaramucci", "scaramuccis", "11 days"),
    _U("mooch", "mooches", "scaramucci"),
)

RATIOS: tuple[UnitTuple, ...] = (
    _U("\u2030", "", "=0.001"),  # per mille
    _U("percent", "", "=0.01"),
    _U("%", "", "=percent"),
    _U("bel", "bels", "0.5 * ln(10) neper"),
    _U("decibel", "decibels", "1/10 bel"),
    _U("dB", "", "decibel"),
    _U("mill", "mills", "0.001"),
    _U("ppm", "", "1e-6"),
    _U("parts_per_million", "", "ppm"),
    _U("ppb", "", "1e-9"),
    _U("parts_per_billion", "", "ppb"),
    _U("ppt", "", "1e-12"),
    _U("parts_per_trillion", "", "ppt"),
    _U("karat", "", "1/24", "measure of gold purity"),
    _U("basispoint", "", "0.01 %"),
)

COMMON_PHYSICAL_UNITS: tuple[UnitTuple, ...] = (
    _U("electron_volt", "electron_volts", "l@electron_charge V"),
    _U("eV", "", "s@electron_volt"),
    _U("light_year", "light_years", "c julian_year"),
    _U("ly", "", "lightyear"),
    _U("light_second", "light_seconds", "c second"),
    _U("light_minute", "light_minutes", "c minute"),
    _U("light_hour", "light_hours", "c hour"),
    _U("light_day", "light_days", "c day"),
    _U("parsec", "parsecs", "l@au / tan(arcsec)"),
    _U("pc", "", "s@parsec"),
    _U("astronomical_unit", "astronomical_units", "149597870700 m"),
    _U("au", "", "astronomical_unit"),
    _U("AU", "", "astronomical_unit"),
    _U("barn", "", "l@1e-28 m^2"),
    _U("shed", "", "l@1e-24 barn"),
    _U("cc", "", "cm^3"),
    _U("are", "ares", "l@100 meter^2"),
    _U("liter", "liters", "l@1000 cc"),
    _U("litre", "litres", "liter"),
    _U("l", "", "s@liter"),
    _U("L", "", "s@liter"),
    _U("micron", "microns", "l@micrometer"),
    _U("bicron", "bicrons", "l@picometer"),
    _U("gsm", "", "grams / meter^2"),
    _U("hectare", "hectares", "hectoare"),
    _U("ha", "", "s@hectare"),
    _U("decare", "decares", "l@decaare"),
    _U("da", "", "s@decare"),
    _U("calorie", "calories", "l@4.184 J"),
    _U("cal", "", "s@calorie"),
    _U("british_thermal_unit", "british_thermal_units", "1055.05585 J"),
    _U("btu", "", "british_thermal_unit"),
    _U("Wh", "", "s@W hour"),
    _U("atmosphere", "atmospheres", "l@101325 Pa"),
    _U("atm", "", "s@atmosphere"),
    _U("mmHg", "", "l@1/760 atm", "millimeter of mercury"),
    _U("inHg", "", "l@25.4 mmHg", "inch of mercury"),
    _U("bar", "", "l@1e5 Pa", "about 1 atmosphere"),
    _U("diopter", "", "l@/m", "reciprocal of focal length"),
    _U("sqm", "", "=m^2"),
    _U("sqmm", "", "=mm^2"),
    _U("gongjin", "", "l@1 kilogram"),
    # compatibility names
    _U("lightyear", "lightyears", "light_year"),
    _U("light", "", "c"),
)

CGS_UNITS: tuple[UnitTuple, ...] = (
    _U("gal", "gals", "cm/s^2", "acceleration"),
    _U("dyne", "dynes", "g*gal", "force"),
    _U("erg", "ergs", "g*cm^2/s^2", "work, energy"),
    _U("barye", "baryes", "g/(cm*s^2)", "pressure"),
    _U("poise", "poises", "g/(cm*s)"),
    _U("stokes", "", "cm^2/s"),
    _U("kayser", "kaysers", "cm^-1"),
    _U("biot", "biots", "10 amperes"),
    _U("emu", "emus", "0.001 A m^2"),
    _U("franklin", "franklins", "dyn^1/2*cm"),
    _U("gauss", "", "10^-4 tesla"),
    _U("maxwell", "maxwells", "10^-8 weber"),
    _U("phot", "phots", "10000 lux"),
    _U("stilb", "stilbs", "10000 candela/m^2"),
    # abbreviations
    _U("gallileo", "gallileos", "gal"),
    _U("dyn", "dyns", "dyne"),
    _U("Ba", "", "barye"),
    _U("P", "", "poise"),
    _U("St", "", "stokes"),
    _U("K", "", "kayser"),
    _U("Bi", "", "biot"),
    _U("Fr", "", "franklin"),
    _U("G", "", "gauss"),
    _U("Mx", "", "maxwell"),
    _U("ph", "", "phot"),
)

IMPERIAL_UNITS: tuple[UnitTuple, ...] = (
    _U("inch", "inches", "2.54 cm"),
    _U("mil", "mils", "1/1000 inch"),
    _U("\u2019", "", "foot"),  # unicode single quote
    _U("\u201d", "", "inch"),  # unicode double quote
    _U("'", "", "foot"),
    _U('"', "", "inch"),
    _U("foot", "feet", "l@12 inch"),
    _U("sqft", "", "=ft^2"),
    _U("yard", "yards", "l@3 ft"),
    _U("mile", "miles", "l@5280 ft"),
    _U("line", "lines", "1/12 inch"),
    _U("rod", "rods", "5.5 yard"),
    _U("pole", "poles", "rod"),
    _U("perch", "perches", "rod"),
    _U("firkin", "firkins", "90 lb"),
    _U("furlong", "furlongs", "40 rod"),
    _U("statute_mile", "statute_miles", "mile"),
    _U("league", "leagues", "3 mile"),
    _U("chain", "chains", "66 feet"),
    _U("link", "links", "1/100 chain"),
    _U("thou", "", "1/1000 inch", "thousandth of an inch"),
    _U("acre", "acres", "10 chain^2"),
    _U("section", "sections", "mile^2"),
    _U("township", "townships", "36 sections"),
    _U("homestead", "homesteads", "160 acres"),
    _U("point", "points", "l@1/72 inch"),
    _U("twip", "twips", "l@1/20 point"),
    _U("poppyseed", "poppyseeds", "l@line"),
    _U("pica", "picas", "l@12 points"),
    _U("barleycorn", "barleycorns", "l@4 poppyseed"),
    _U("finger", "fingers", "l@63 points"),
    _U("stick", "sticks", "l@2 inches"),
    _U("palm", "palms", "l@3 inches"),
    _U("digit", "digits", "l@1/4 palms"),
    _U("nail", "nails", "l@3 digits"),
    _U("span", "spans", "l@4 nails"),
    _U("hand", "hands", "l@2 sticks"),
    _U("shaftment", "shaftments", "l@2 palm"),
    _U("cubit", "cubits", "l@2 span"),
    _U("ell", "ells", "l@5 span"),
    _U("skein", "skeins", "l@96 ell"),
    _U("spindle", "spindles", "l@120 skein"),
    _U("link", "links", "l@1/25 rod"),
    _U("fathom", "fathoms", "l@2 yard"),
    _U("shackle", "shackles", "l@15 yard"),
    _U("pace", "paces", "l@5 shaftments"),
    _U("step", "steps", "l@2 paces"),
    _U("grade", "grades", "l@pace"),
    _U("rope", "ropes", "l@4 steps"),
    _U("ramsdens_chain", "", "l@5 rope"),
    _U("roman_mile", "roman_miles", "l@50 ramsdens_chain"),
    _U("gunters_chain", "gunters_chains", "l@4 rod"),
)

LIQUID_UNITS: tuple[UnitTuple, ...] = (
    _U("gallon", "gallons", "231 inch^3"),
    _U("gal", "", "gallon"),
    _U("quart", "quarts", "1/4 gallon"),
    _U("pint", "pints", "1/2 quart"),
    _U("cup", "cups", "1/2 pint"),
    _U("gill", "", "1/4 pint"),
    _U("fluid_ounce", "", "1/16 pint"),
    _U("tablespoon", "tablespoons", "1/2 floz"),
    _U("teaspoon", "teaspoons", "1/3 tablespoon"),
    _U("fluid_dram", "", "1/8 floz"),
    _U("qt", "", "quart"),
    _U("pt", "", "pint"),
    _U("floz", "", "fluid_ounce"),
    _U("tbsp", "", "tablespoon"),
    _U("tbs", "", "tablespoon"),
    _U("tsp", "", "teaspoon"),
)

AVOIRDUPOIS_WEIGHT: tuple[UnitTuple, ...] = (
    _U("pound", "pounds", "0.45359237 kg"),
    _U("lb", "lbs", "pound"),
    _U("grain", "grains", "1/7000 pound"),
    _U("ounce", "ounces", "1/16 pound"),
    _U("oz", "", "ounce"),
    _U("dram", "drams", "1/16 ounce"),
    _U("dr", "", "dram"),
    _U("hundredweight", "hundredweights", "100 pounds"),
    _U("cwt", "", "hundredweight"),
    _U("short_ton", "short_tons", "2000 pounds"),
    _U("quarterweight", "quarterweights", "1/4 short_ton"),
    _U("stone", "stones", "14 pounds"),
    _U("st", "", "stone"),
)

TROY_WEIGHT: tuple[UnitTuple, ...] = (
    _U("troy_pound", "troy_pounds", "5760 grains"),
    _U("troy_ounce", "troy_ounces", "1/12 troy_pound"),
    _U("ozt", "", "troy_ounce"),
    _U("pennyweight", "pennyweights", "1/20 troy_ounce"),
    _U("dwt", "", "pennyweight"),
)

OTHER_WEIGHTS: tuple[UnitTuple, ...] = (
    _U("metric_grain", "metric_grains", "50 mg"),
    _U("carat", "carats", "0.2 grams"),
    _U("ct", "", "carat"),
    _U("jewellers_point", "jewellers_points", "1/100 carat"),
    _U("tonne", "tonnes", "l@1000 kg"),
    _U("t", "", "tonne"),
)

IMPERIAL_ABBREVIATIONS: tuple[UnitTuple, ...] = (
    _U("yd", "", "yard"),
    _U("ch", "", "chain"),
    _U("ft", "", "foot"),
    _U("mph", "", "mile/hr"),
    _U("mpg", "", "mile/gal"),
    _U("kph", "", "km/hr"),
    _U("kmh", "", "km/hr"),
    _U("fpm", "", "ft/min"),
    _U("fps", "", "ft/s"),
    _U("rpm", "", "rev/min"),
    _U("rps", "", "rev/sec"),
    _U("mi", "", "mile"),
    _U("smi", "", "mile"),
    _U("nmi", "", "nautical_mile"),
    _U("mbh", "", "1e3 btu/hour"),
    _U("ipy", "", "inch/year"),
    _U("ccf", "", "100 ft^3"),
    _U("Mcf", "", "1000 ft^3"),
    _U("plf", "", "lb / foot", "pounds per linear foot"),
    _U("lbf", "", "lb force"),
    _U("psi", "", "pound force / inch^2"),
    _U("fur", "furs", "furlong"),
    _U("fir", "firs", "firkin"),
    _U("ftn", "ftns", "fortnight"),
)

NAUTICAL_UNITS: tuple[UnitTuple, ...] = (
    _U("fathom", "fathoms", "6 ft"),
    _U("nautical_mile", "nautical_miles", "1852 m"),
    _U("cable", "cables", "1/10 nautical_mile"),
    _U("marine_league", "marine_leagues", "3 nautical_mile"),
    _U("knot", "knots", "nautical_mile / hr"),
    _U("kn", "", "=knots"),
    _U("click", "clicks", "km"),
    _U("NM", "", "nautical_mile"),
)

CURRENCIES: tuple[UnitTuple, ...] = (
    _U("BASE_CURRENCY", "BASE_CURRENCY", "!"),
    _U("dollar", "dollars", "USD"),
    _U("cent", "cents", "0.01 USD"),
    _U("US$", "US$", "USD"),
    _U("$", "$", "USD"),
    _U("euro", "euros", "EUR"),
    _U("\u20ac", "\u20ac", "EUR"),
    _U("\u00a3", "\u00a3", "GBP"),
    _U("AU$", "AU$", "AUD"),
    _U("HK$", "HK$", "HKD"),
    _U("NZ$", "NZ$", "NZD"),
    _U("z\u0142", "z\u0142", "PLN"),
    _U("zl", "zl", "PLN"),
)

# ISO 4217 currency codes, kept in sorted order for binary search.
CURRENCY_IDENTIFIERS: tuple[str, ...] = (
    "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN", "BAM",
    "BBD", "BDT", "BGN", "BHD", "BIF", "BMD", "BND", "BOB", "BOV", "BRL", "BSD",
    "BTN", "BWP", "BYN", "BZD", "CAD", "CDF", "CHE", "CHF", "CHW", "CLF", "CLP",
    "CNY", "COP", "COU", "CRC", "CUC", "CUP", "CVE", "CZK", "DJF", "DKK", "DOP",
    "DZD", "EGP", "ERN", "ETB", "EUR", "FJD", "FKP", "GBP", "GEL", "GHS", "GIP",
    "GMD", "GNF", "GTQ", "GYD", "HKD", "HNL", "HRK", "HTG", "HUF", "IDR", "ILS",
    "INR", "IQD", "IRR", "ISK", "JMD", "JOD", "JPY", "KES", "KGS", "KHR", "KMF",
    "KPW", "KRW", "KWD", "KYD", "KZT", "LAK", "LBP", "LKR", "LRD", "LSL", "LYD",
    "MAD", "MDL", "MGA", "MKD", "MMK", "MNT", "MOP", "MRU", "MUR", "MVR", "MWK",
    "MXN", "MXV", "MYR", "MZN", "NAD", "NGN", "NIO", "NOK", "NPR", "NZD", "OMR",
    "PAB", "PEN", "PGK", "PHP", "PKR", "PLN", "PYG", "QAR", "RON", "RSD", "RUB",
    "RWF", "SAR", "SBD", "SCR", "SDG", "SEK", "SGD", "SHP", "SLE", "SLL", "SOS",
    "SRD", "SSP", "STN", "SVC", "SYP", "SZL", "THB", "TJS", "TMT", "TND", "TOP",
    "TRY", "TTD", "TWD", "TZS", "UAH", "UGX", "USD", "USN", "UYI", "UYU", "UYW",
    "UZS", "VED", "VES", "VND", "VUV", "WST", "XAF", "XAG", "XAU", "XBA", "XBB",
    "XBC", "XBD", "XCD", "XDR", "XOF", "XPD", "XPF", "XPT", "XSU", "XTS", "XUA",
    "XXX", "YER", "ZAR", "ZMW", "ZWL",
)

# Short prefixes and their definitions; looked up only when splitting a
# prefixed unit name such as "km".
SHORT_PREFIXES: tuple[tuple[str, str], ...] = (
    ("Ki", "sp@kibi"),
    ("Mi", "sp@mebi"),
    ("Gi", "sp@gibi"),
    ("Ti", "sp@tebi"),
    ("Pi", "sp@pebi"),
    ("Ei", "sp@exbi"),
    ("Zi", "sp@zebi"),
    ("Yi", "sp@yobi"),
    ("Y", "sp@yotta"),
    ("Z", "sp@zetta"),
    ("E", "sp@exa"),
    ("P", "sp@peta"),
    ("T", "sp@tera"),
    ("G", "sp@giga"),
    ("M", "sp@mega"),
    ("k", "sp@kilo"),
    ("h", "sp@hecto"),
    ("da", "sp@deka"),
    ("d", "sp@deci"),
    ("c", "sp@centi"),
    ("m", "sp@milli"),
    ("u", "sp@micro"),
    ("\u00b5", "sp@micro"),  # micro sign
    ("\u03bc", "sp@micro"),  # greek small letter mu
    ("n", "sp@nano"),
    ("p", "sp@pico"),
    ("f", "sp@femto"),
    ("a", "sp@atto"),
    ("z", "sp@zepto"),
    ("y", "sp@yocto"),
)

# Named units that replace a combination of base units when simplifying.
DEFAULT_UNITS: tuple[tuple[str, str], ...] = (
    ("hertz", "second^-1"),
    ("newton", "kilogram^1 meter^1 second^-2"),
    ("pascal", "kilogram^1 meter^-1 second^-2"),
    ("joule", "kilogram^1 meter^2 second^-2"),
    ("watt", "kilogram^1 meter^2 second^-3"),
    ("ohm", "ampere^-2 kilogram^1 meter^2 second^-3"),
    ("volt", "ampere^-1 kilogram^1 meter^2 second^-3"),
    ("liter", "meter^3"),
)

# Used for implicit unit addition, e.g. 5'5 -> 5'5"
IMPLICIT_UNIT_MAP: tuple[tuple[str, str], ...] = (("'", '"'), ("foot", "inches"))

_ALL_GROUPS: tuple[tuple[UnitTuple, ...], ...] = (
    BASE_UNITS,
    BASE_UNIT_ABBREVIATIONS,
    TEMPERATURE_SCALES,
    BITS_AND_BYTES,
    STANDARD_PREFIXES,
    NON_STANDARD_PREFIXES,
    BINARY_PREFIXES,
    NUMBER_WORDS,
    CONSTANTS,
    ANGLES,
    SOLID_ANGLES,
    COMMON_SI_DERIVED_UNITS,
    TIME_UNITS,
    RATIOS,
    COMMON_PHYSICAL_UNITS,
    IMPERIAL_UNITS,
    LIQUID_UNITS,
    AVOIRDUPOIS_WEIGHT,
    TROY_WEIGHT,
    OTHER_WEIGHTS,
    IMPERIAL_ABBREVIATIONS,
    NAUTICAL_UNITS,
    CURRENCIES,
    CGS_UNITS,
)


def si_unit_groups() -> tuple[tuple[UnitTuple, ...], ...]:
    """Return all unit groups in lookup order; earlier entries take precedence."""
    return _ALL_GROUPS