"""
Tests for case-style conversion and ORM naming helpers.
"""

import pytest


class TestCapitalize:
    def test_first_letter(self, ruleset):
        assert ruleset.capitalize("hello world") == "Hello world"

    def test_id_special_case(self, ruleset):
        assert ruleset.capitalize("id") == "ID"
        assert ruleset.capitalize("Id") == "ID"

    def test_empty_string(self, ruleset):
        assert ruleset.capitalize("") == ""

    def test_keeps_length(self, ruleset):
        assert ruleset.capitalize("ßa") == "ßa"


class TestCamelize:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("dino_party", "DinoParty"),
            ("big-ben", "BigBen"),
            ("active_record:errors", "ActiveRecordErrors"),
            ("hello world", "HelloWorld"),
            ("user_id", "UserId"),
            ("DinoParty", "DinoParty"),
            ("XMLHttp", "XMLHttp"),
        ],
    )
    def test_camelize(self, ruleset, word, expected):
        assert ruleset.camelize(word) == expected

    def test_id_special_case(self, ruleset):
        assert ruleset.camelize("id") == "ID"
        assert ruleset.camelize("ID") == "ID"

    def test_down_first(self, ruleset):
        assert ruleset.camelize_down_first("dino_party") == "dinoParty"
        assert ruleset.camelize_down_first("Big_Ben") == "bigBen"

    def test_down_first_empty(self, ruleset):
        assert ruleset.camelize_down_first("") == ""

    def test_keeps_length(self, ruleset):
        """Letters with a multi-character uppercase form are kept as is."""
        assert ruleset.camelize("ßtrasse") == "ßtrasse"
        assert ruleset.camelize("straße_plan") == "StraßePlan"


class TestTitleize:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("hello there", "Hello There"),
            ("active_record", "Active Record"),
            ("ActiveRecord", "Active Record"),
            ("action web service", "Action Web Service"),
            ("Action web service", "Action Web Service"),
            ("actionwebservice", "Actionwebservice"),
            ("david's code", "David's Code"),
            ("A Bbbb", "A Bbbb"),
        ],
    )
    def test_titleize(self, ruleset, word, expected):
        assert ruleset.titleize(word) == expected

    def test_registered_acronym_word(self, ruleset):
        ruleset.add_acronym("HTML")
        assert ruleset.titleize("html parser") == "HTML Parser"

    def test_acronym_letters_rejoined(self, ruleset):
        ruleset.add_acronym("HTML")
        assert ruleset.titleize("HTMLParser") == "HTML Parser"

    def test_single_letter_run(self, ruleset):
        ruleset.add_acronym("USA")
        assert ruleset.titleize("USA") == "USA"
        assert ruleset.titleize("made in USA") == "Made In USA"

    def test_unregistered_letters_stay_apart(self, empty_ruleset):
        assert empty_ruleset.titleize("USA") == "U S A"

    def test_default_acronyms(self, ruleset):
        assert ruleset.titleize("HTTPServer") == "HTTP Server"
        assert ruleset.titleize("wifi router") == "WiFi Router"


class TestUnderscore:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("BigBen", "big_ben"),
            ("bigBen", "big_ben"),
            ("big ben", "big_ben"),
            ("big-ben", "big_ben"),
            ("ActiveRecord::Errors", "active_record_errors"),
            ("big_ben", "big_ben"),
        ],
    )
    def test_underscore(self, ruleset, word, expected):
        assert ruleset.underscore(word) == expected

    def test_default_acronym_folded(self, ruleset):
        assert ruleset.underscore("HTTPServer") == "http_server"
        assert ruleset.underscore("APIClient") == "api_client"

    def test_registered_acronym_folded(self, ruleset):
        ruleset.add_acronym("HTML")
        assert ruleset.underscore("HTMLParser") == "html_parser"

    def test_unregistered_acronym_split(self, empty_ruleset):
        assert empty_ruleset.underscore("HTMLParser") == "h_t_m_l_parser"


class TestDasherize:
    def test_dasherize(self, ruleset):
        assert ruleset.dasherize("SomeText") == "some-text"
        assert ruleset.dasherize("some_text") == "some-text"
        assert ruleset.dasherize("some text") == "some-text"

    def test_acronym_folded(self, ruleset):
        assert ruleset.dasherize("URLParser") == "url-parser"


class TestHumanize:
    def test_humanize(self, ruleset):
        assert ruleset.humanize("employee_salary") == "Employee salary"
        assert ruleset.humanize("BigBen") == "Big ben"

    def test_strips_foreign_key_suffix(self, ruleset):
        assert ruleset.humanize("author_id") == "Author"

    def test_only_trailing_id_stripped(self, ruleset):
        assert ruleset.humanize("id_card") == "Id card"

    def test_human_rules(self, ruleset):
        ruleset.add_human("col_rpted_bugs", "reported bugs")
        assert ruleset.humanize("col_rpted_bugs") == "Reported bugs"

    def test_human_rules_most_recent_first(self, ruleset):
        ruleset.add_human("cnt", "count")
        ruleset.add_human("item_cnt", "number of items")
        assert ruleset.humanize("item_cnt") == "Number of items"

    def test_empty_string(self, ruleset):
        assert ruleset.humanize("") == ""


class TestForeignKeys:
    def test_foreign_key(self, ruleset):
        assert ruleset.foreign_key("Person") == "person_id"
        assert ruleset.foreign_key("people") == "person_id"
        assert ruleset.foreign_key("BlogPost") == "blog_post_id"

    def test_foreign_key_condensed(self, ruleset):
        assert ruleset.foreign_key_condensed("Person") == "personid"

    def test_foreign_key_to_attribute(self, ruleset):
        assert ruleset.foreign_key_to_attribute("person_id") == "PersonID"
        assert ruleset.foreign_key_to_attribute("person") == "Person"
        assert ruleset.foreign_key_to_attribute("id") == "ID"


class TestTableNames:
    def test_tableize(self, ruleset):
        assert ruleset.tableize("SuperPerson") == "super_people"
        assert ruleset.tableize("RawScaledScorer") == "raw_scaled_scorers"
        assert ruleset.tableize("category") == "categories"

    def test_typeify(self, ruleset):
        assert ruleset.typeify("users") == "User"
        assert ruleset.typeify("blog_posts") == "BlogPost"

    def test_typeify_strips_table_prefix(self, ruleset):
        assert ruleset.typeify("schema.blog_posts") == "BlogPost"
        assert ruleset.typeify("public.people") == "Person"
