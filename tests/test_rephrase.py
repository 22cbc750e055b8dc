from privatepen.config import surface_preset
from privatepen.rephrase import CREATIVE_TABLE, FORMAL_TABLE, rephrase, truncate_sentences
from privatepen.substitution import SubstitutionTable


def test_formal_substitutions_apply_in_order():
    result = rephrase("I got a very good thing but it is really stuff")
    assert result.formal == "I obtained a extremely good matter however it is genuinely material"


def test_formal_matches_phrases_and_ignores_case():
    assert FORMAL_TABLE.apply("A lot of people GET it") == "numerous people obtain it"


def test_substitutions_respect_word_boundaries():
    assert rephrase("Getting forgotten").formal == "Getting forgotten"


def test_simple_and_creative_variants():
    result = rephrase("We utilize tools to demonstrate and obtain results. She said it was good.")
    assert result.simple == "We use tools to show and get results. She said it was good."
    assert result.creative == (
        "We utilize tools to demonstrate and obtain results. "
        "She articulated it was remarkable."
    )


def test_creative_output_is_not_rewritten_by_later_rules():
    assert CREATIVE_TABLE.apply("show it") == "demonstrate it"


def test_sidepanel_simple_truncates_long_sentences():
    words = " ".join(f"w{i}" for i in range(1, 21))
    result = rephrase(f"{words}. Short one.", surface_preset("sidepanel"))
    expected_first = " ".join(f"w{i}" for i in range(1, 16))
    assert result.simple == f"{expected_first}. Short one."


def test_truncate_sentences_handles_empty_text():
    assert truncate_sentences("", 15) == ""


def test_replacement_text_is_literal():
    table = SubstitutionTable([("cost", r"\1 dollars")])
    assert table.apply("the cost") == r"the \1 dollars"
