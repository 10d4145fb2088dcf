from __future__ import annotations

import re


CASES = {"Nom": "NOM", "Acc": "AKK", "Dat": "DAT", "Gen": "GEN"}
NUMBERS = {"Sing": "SIN", "Plur": "PLU"}
GENDERS = {"Masc": "MAS", "Fem": "FEM", "Neut": "NEU"}
TENSES = {"Pres": "PRÄ", "Past": "PRT"}

NOMINAL_TAGS = {
    "NN": "SUB",
    "NE": "EIG",
    "PDS": "PRO:DEM",
    "PDAT": "PRO:DEM",
    "PRELS": "PRO:REL",
    "PRELAT": "PRO:REL",
    "PPOSAT": "PRO:POS",
    "PPOSS": "PRO:POS",
    "PIS": "PRO:IND",
    "PIAT": "PRO:IND",
    "PIDAT": "PRO:IND",
    "PPER": "PRO:PER",
    "PRF": "PRO:PER",
    "PWS": "PRO:INR",
    "PWAT": "PRO:INR",
}
FIXED_TAGS = {
    "ADJD": "ADJ:PRD:GRU",
    "ADV": "ADV:MOD",
    "PROAV": "ADV:PRO",
    "PWAV": "ADV:INR",
    "KOUS": "KON:UNT",
    "KOUI": "KON:UNT",
    "KON": "KON:NEB",
    "KOKOM": "KON:VGL",
    "PTKNEG": "NEG",
    "PTKZU": "PTK:ZU",
    "PTKVZ": "ZUS",
    "CARD": "ZAL",
    "ITJ": "INJ",
}
PREPOSITION_TAGS = frozenset({"APPR", "APPRART", "APPO", "APZR"})
VERB_GROUPS = {"VV": "", "VA": "AUX", "VM": "MOD"}
PLURAL_LESS_INFINITIVES = frozenset({"sein"})

# Present participles used attributively ("fahrende", "lachenden").
_PRESENT_PARTICIPLE_RE = re.compile(r"\w{2,}end(e[mnrs]?)?$")


def parse_morphology(morphology: str | None) -> dict[str, str]:
    features: dict[str, str] = {}
    if not morphology:
        return features
    for item in morphology.split("|"):
        key, _, value = item.partition("=")
        if key and value:
            features[key] = value
    return features


def _agreement(features: dict[str, str]) -> list[str]:
    segments = []
    if features.get("Case") in CASES:
        segments.append(CASES[features["Case"]])
    number = NUMBERS.get(features.get("Number", ""))
    if number:
        segments.append(number)
    if features.get("Gender") in GENDERS:
        segments.append(GENDERS[features["Gender"]])
    return segments


def _verb_tags(stts: str, features: dict[str, str], text: str) -> tuple[str, ...]:
    group = VERB_GROUPS.get(stts[:2])
    if group is None:
        return ()
    form = stts[2:]
    head = ["VER", group] if group else ["VER"]
    suffix = [] if group else ["SFT"]
    if form == "FIN":
        person = features.get("Person", "3")
        number = NUMBERS.get(features.get("Number", ""), "SIN")
        tense = TENSES.get(features.get("Tense", ""), "PRÄ")
        tails = [[person, number, tense, *suffix]]
    elif form == "INF":
        tails = [["INF", *suffix]]
        # Infinitives share their form with the 1st/3rd person plural present ("wir lesen").
        if text.lower() not in PLURAL_LESS_INFINITIVES:
            tails += [["1", "PLU", "PRÄ", *suffix], ["3", "PLU", "PRÄ", *suffix]]
    elif form == "IZU":
        tails = [["EIZ", "SFT"]]
    elif form == "PP":
        tails = [["PA2", *suffix]]
    elif form == "IMP":
        tails = [["IMP", NUMBERS.get(features.get("Number", ""), "SIN"), *suffix]]
    else:
        return ()
    return tuple(":".join(head + tail) for tail in tails)


def to_tags(stts: str | None, morphology: str | None, text: str = "") -> tuple[str, ...]:
    """Map an STTS tag plus UD morphology to morphological tag strings.

    Punctuation and tags without a counterpart map to no readings.
    """
    if not stts:
        return ()
    features = parse_morphology(morphology)

    if stts in NOMINAL_TAGS:
        return (":".join([NOMINAL_TAGS[stts], *_agreement(features)]),)
    if stts == "ART":
        kind = "IND" if features.get("Definite") == "Ind" else "DEF"
        return (":".join(["ART", kind, *_agreement(features)]),)
    if stts == "ADJA":
        pos = "PA1" if _PRESENT_PARTICIPLE_RE.search(text.lower()) else "ADJ"
        return (":".join([pos, *_agreement(features), "GRU"]),)
    if stts in FIXED_TAGS:
        return (FIXED_TAGS[stts],)
    if stts in PREPOSITION_TAGS:
        case = CASES.get(features.get("Case", ""))
        return ("PRP:" + case if case else "PRP:LOK",)
    return _verb_tags(stts, features, text)
