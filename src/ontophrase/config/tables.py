"""
Static tables for processing the schema.org vocabulary.

These are the defaults of ResolverConfig; a caller that needs different
tables builds a config with its own values rather than editing this module.
"""

from .. import semantic_types as st

SCHEMA_NAMESPACE = "http://schema.org/"
DEFAULT_VOCABULARY_URL = "https://schema.org/version/3.9/schema.jsonld"
DEFAULT_CLASS_NAME = "org.schema"

ROOT_TYPE = "Thing"
ACTION_ROOT = "Action"
ENUM_ROOT = "Enumeration"
COLLECTION_ROOT = "ItemList"
GENERIC_TEXT_TYPE = "Text"
AMBIGUOUS_NUMERIC_TYPE = "QuantitativeValue"

# suffixes that turn a collection type name into its element type name
COLLECTION_SUFFIXES = ("List", "Collection", "Section", "Catalog")

BUILTIN_TYPEMAP = {
    "Time": st.Time,
    "Number": st.Number,
    "Float": st.Number,
    "Integer": st.Number,
    "Text": st.String,
    "Boolean": st.Boolean,
    "DateTime": st.Date,
    "Date": st.Date,
    "DataType": st.Any,
    "URL": st.EntityRef("tt:url"),
    "ImageObject": st.EntityRef("tt:picture"),
    "Barcode": st.EntityRef("tt:picture"),

    "Mass": st.Measure("kg"),
    "Energy": st.Measure("kcal"),
    "Distance": st.Measure("m"),
    "Duration": st.Measure("ms"),

    "GeoCoordinates": st.Location,
    "MonetaryAmount": st.Currency,

    "QuantitativeValue": st.Any,
}

# property names matched (case-insensitively) when the best candidate is AMBIGUOUS_NUMERIC_TYPE
NUMERIC_NAME_HINTS = (
    ("number", st.Number),
    ("level", st.Number),
    ("quantity", st.Number),
    ("duration", st.Measure("ms")),
)

KEYWORDS = frozenset([
    "let", "now", "new", "as", "of", "in", "out", "req", "opt", "notify", "return",
    "join", "edge", "monitor", "class", "extends", "mixin", "this", "import", "null",
    "enum", "aggregate", "dataset", "oninput", "sort", "asc", "desc", "bookkeeping",
    "compute", "true", "false",
])

BLOCKED_TYPES = frozenset([
    "QualitativeValue", "PropertyValue", "BedType", "MedicalBusiness",

    # turns Audience into an enum
    "Researcher",
])

BLOCKED_PROPERTIES = frozenset([
    "sameAs", "affiliation", "mainEntityOfPage",
    "embedUrl",

    # TODO split by domain: aggregateRating.itemReviewed should go, Review.itemReviewed should stay
    "itemReviewed",

    # range of rating
    "bestRating", "worstRating",

    # renamed to description downstream
    "reviewBody",

    # loops PriceSpecification and Offer into entities
    "eligibleTransactionVolume",
    "addOn",

    "areaServed",

    # handled downstream together with price
    "priceCurrency",
])

STRUCT_ROOTS = ("StructuredValue", "Rating", "Offer")

NON_STRUCT_TYPES = frozenset()

# struct types that also pull in name & description from Thing
STRUCT_INCLUDE_ROOT_PROPERTIES = frozenset(["LocationFeatureSpecification"])

PROPERTY_FORCE_ARRAY = frozenset([
    "worksFor",

    "recipeCuisine",
    "recipeCategory",
])

PROPERTY_FORCE_NOT_ARRAY = frozenset([
    "offers",
])

PROPERTY_TYPE_OVERRIDE = {
    "telephone": st.EntityRef("tt:phone_number"),
    "email": st.EntityRef("tt:email_address"),
    "image": st.EntityRef("tt:picture"),
    "logo": st.EntityRef("tt:picture"),
    "checkinTime": st.Time,
    "checkoutTime": st.Time,
    "price": st.Currency,

    "weight": st.Measure("ms"),
    "depth": st.Measure("m"),
    "description": st.String,
    "addressCountry": st.EntityRef("tt:country"),
    "addressRegion": st.EntityRef("tt:us_state"),

    # VideoObject rather than Clip
    "video": st.EntityRef("org.schema:VideoObject"),

    # Organization rather than Person
    "publisher": st.EntityRef("org.schema:Organization"),

    # number-like, mostly text
    "recipeYield": st.String,
}

PROPERTY_CANONICAL_OVERRIDE = {
    # thing
    "url": {
        "base": ["url", "link"],
    },
    "name": {
        "base": ["name"],
        "passive_verb": ["called"],
    },
    "description": {
        "base": ["description", "summary"],
    },

    # location
    "geo": {
        "base": ["location", "address"],
        "passive_verb": ["in #", "around #", "at #", "on #"],
    },
    "streetAddress": {
        "base": ["street"],
    },
    "addressCountry": {
        "passive_verb": ["in #"],
        "base": ["country"],
    },
    "addressRegion": {
        "passive_verb": ["in #"],
        "base": ["state"],
    },
    "addressLocality": {
        "base": ["city"],
    },
}

MANUAL_PROPERTY_CANONICAL_OVERRIDE = {
    # restaurants
    "datePublished": {
        "passive_verb": ["published on #", "written on #"],
        "base": ["date published"],
    },
    "ratingValue": {
        "passive_verb": ["rated # star"],
        "base": ["rating"],
    },
    "reviewRating": {
        "base": ["rating"],
    },
    "telephone": {
        "base": ["telephone", "phone number"],
    },
    "servesCuisine": {
        "adjective": ["#"],
        "verb": ["serves # cuisine", "serves # food", "offer # cuisine", "offer # food", "serves", "offers"],
        "property": ["# cuisine", "# food"],
        "base": ["cuisine", "food type"],
    },

    # hotels
    "amenityFeature": {
        "base": ["amenity", "amenity feature"],
        "verb": ["offers #", "offer #", "has #", "have #"],
    },
    "checkinTime": {
        "base": ["checkin time", "check in time", "check-in time"],
    },
    "checkoutTime": {
        "base": ["checkout time", "check out time", "check-out time"],
    },

    # people
    "alumniOf": {
        "base": ["college degrees", "universities", "alma maters"],
        "reverse_property": [
            "alumni of #", "alumnus of #", "alumna of #",
            "# alumnus", "# alumni", "# grad", "# graduate",
        ],
        "verb": ["went to #", "graduated from #", "attended #", "studied at #"],
        "passive_verb": ["educated at #", "graduated from #"],
    },
    "award": {
        "base": ["awards"],
        "reverse_property": [
            "winner of #", "recipient of #",
            "# winner", "# awardee", "# recipient", "# holder",
        ],
        "verb": [
            "has the award #", "has received the # award", "won the award for #", "won the # award",
            "received the # award", "received the #", "won the #", "won #",
            "holds the award for #", "holds the # award",
        ],
    },
    "affiliation": {
        "base": ["affiliations"],
        "reverse_property": ["member of #"],
        "passive_verb": ["affiliated with #", "affiliated to #"],
    },
    "worksFor": {
        "base": ["employers"],
        "reverse_property": ["employee of #", "# employee"],
        "verb": ["works for #", "works at #", "worked at #", "worked for #"],
        "passive_verb": ["employed at #", "employed by #"],
    },

    # recipes
    "author": {
        "base": ["author", "creator"],
        "passive_verb": [
            "by", "made by", "written by", "created by", "authored by", "uploaded by", "submitted by",
        ],
    },
    "publisher": {
        "base": ["publisher"],
        "passive_verb": ["by", "made by", "published by"],
    },
    "prepTime": {
        "verb": ["takes # to prepare", "needs # to prepare"],
        "base": ["prep time", "preparation time", "time to prep", "time to prepare"],
    },
    "cookTime": {
        "verb": ["takes # to cook", "needs # to cook"],
        "base": ["cook time", "cooking time", "time to cook"],
    },
    "totalTime": {
        "verb": ["takes #", "requires #", "needs #", "uses #", "consumes #"],
        "base": ["total time", "time in total", "time to make"],
    },
    "recipeYield": {
        "verb": ["yields #", "feeds #", "produces #", "results in #", "is good for #"],
        "passive_verb": ["yielding #"],
        "base": ["yield amount", "yield size"],
    },
    "recipeCategory": {
        "base": ["categories"],
    },
    "recipeIngredient": {
        "verb": ["contains", "uses", "has"],
        "passive_verb": ["containing", "using"],
        "base": ["ingredients"],
    },
    "recipeInstructions": {
        "base": ["instructions"],
    },
    "recipeCuisines": {
        "adjective": ["#"],
        "verb": ["belongs to the # cuisine"],
        "base": ["cuisines", "cuisine"],
    },
    "reviewBody": {
        "base": ["body", "text", "content"],
    },
    "saturatedFatContent": {
        "base": ["saturated fat content", "saturated fat amount", "saturated fat", "trans fat"],
    },

    # product
    "mpn": {
        "base": ["manufacturer part number"],
    },
}

PROPERTIES_NO_FILTER = frozenset([
    # if the id has ner support, a primitive is generated for it instead
    "name",
    "priceRange",

    # ids and opaque strings
    "gtin13",
    "productID",
    "mpn",
])

# covered by geo when the owning type has one
PROPERTIES_DROP_WITH_GEO = frozenset([
    "streetAddress",
    "addressLocality",
])

STRING_FILE_OVERRIDES = {
    "org.schema:Restaurant_name": "com.yelp:restaurant_names",
    "org.schema:Person_name": "tt:person_full_name",
    "org.schema:Person_alumniOf": "tt:university_names",
    "org.schema:Person_worksFor": "tt:company_name",
    "org.schema:Hotel_name": "tt:hotel_name",
}
