"""
Tests for the root query fields
"""

import pytest

from starwars.data import Episode, Review, ReviewRepository


def run(stitched, make_context, query, variables=None):
    result = stitched.schema.execute_sync(
        query, variable_values=variables, context_value=make_context()
    )
    return result


class TestHero:
    def test_default_hero(self, stitched, make_context):
        result = run(stitched, make_context, "{ hero { __typename name } }")
        assert result.errors is None
        assert result.data == {"hero": {"__typename": "Droid", "name": "R2-D2"}}

    def test_hero_of_empire(self, stitched, make_context):
        result = run(
            stitched,
            make_context,
            "query Hero($episode: Episode!) { hero(episode: $episode) { name "
            "... on Human { homePlanet } } }",
            {"episode": "EMPIRE"},
        )
        assert result.errors is None
        assert result.data == {"hero": {"name": "Luke Skywalker", "homePlanet": "Tatooine"}}


class TestCharacters:
    def test_character_by_ids(self, stitched, make_context):
        result = run(
            stitched,
            make_context,
            '{ character(characterIds: ["1000", "9999", "2001"]) { id name } }',
        )
        assert result.errors is None
        assert result.data == {
            "character": [
                {"id": "1000", "name": "Luke Skywalker"},
                {"id": "2001", "name": "R2-D2"},
            ]
        }

    def test_human_and_droid(self, stitched, make_context):
        result = run(
            stitched,
            make_context,
            '{ human(id: "1003") { name appearsIn otherHuman { name } } '
            'droid(id: "2000") { primaryFunction } missing: human(id: "2000") { name } }',
        )
        assert result.errors is None
        assert result.data == {
            "human": {
                "name": "Leia Organa",
                "appearsIn": ["NEWHOPE", "EMPIRE", "JEDI"],
                "otherHuman": {"name": "Luke Skywalker"},
            },
            "droid": {"primaryFunction": "Protocol"},
            "missing": None,
        }

    def test_other_human_is_first_human_friend(self, stitched, make_context):
        result = run(stitched, make_context, '{ human(id: "1001") { otherHuman { name } } }')
        assert result.errors is None
        assert result.data == {"human": {"otherHuman": {"name": "Wilhuff Tarkin"}}}

    def test_height_in_feet(self, stitched, make_context):
        result = run(
            stitched,
            make_context,
            '{ human(id: "1000") { meters: height feet: height(unit: FOOT) } }',
        )
        assert result.errors is None
        assert result.data["human"]["meters"] == pytest.approx(1.72)
        assert result.data["human"]["feet"] == pytest.approx(1.72 * 3.28084)


class TestFriendsPagination:
    QUERY = """
        query Friends($first: PaginationAmount, $after: String) {
          human(id: "1000") {
            friends(first: $first, after: $after) {
              totalCount
              edges { cursor node { name } }
              pageInfo { hasNextPage hasPreviousPage endCursor }
            }
          }
        }
    """

    def test_first_page(self, stitched, make_context):
        result = run(stitched, make_context, self.QUERY, {"first": 2})
        assert result.errors is None

        friends = result.data["human"]["friends"]
        assert friends["totalCount"] == 4
        assert [e["node"]["name"] for e in friends["edges"]] == ["Han Solo", "Leia Organa"]
        assert friends["pageInfo"]["hasNextPage"] is True
        assert friends["pageInfo"]["hasPreviousPage"] is False

    def test_next_page_after_cursor(self, stitched, make_context):
        first_page = run(stitched, make_context, self.QUERY, {"first": 2})
        cursor = first_page.data["human"]["friends"]["pageInfo"]["endCursor"]

        result = run(stitched, make_context, self.QUERY, {"first": 2, "after": cursor})
        assert result.errors is None

        friends = result.data["human"]["friends"]
        assert [e["node"]["name"] for e in friends["edges"]] == ["C-3PO", "R2-D2"]
        assert friends["pageInfo"]["hasNextPage"] is False
        assert friends["pageInfo"]["hasPreviousPage"] is True

    def test_without_first_returns_all(self, stitched, make_context):
        result = run(stitched, make_context, '{ droid(id: "2001") { friends { nodes { id } } } }')
        assert result.errors is None
        assert result.data["droid"]["friends"]["nodes"] == [
            {"id": "1000"},
            {"id": "1002"},
            {"id": "1003"},
        ]

    @pytest.mark.parametrize("amount", [51, -1])
    def test_pagination_amount_out_of_range(self, stitched, make_context, amount):
        result = run(stitched, make_context, self.QUERY, {"first": amount})
        assert result.errors
        assert "PaginationAmount" in result.errors[0].message

    def test_pagination_amount_literal_out_of_range(self, stitched, make_context):
        result = run(
            stitched, make_context, '{ human(id: "1000") { friends(first: 100) { totalCount } } }'
        )
        assert result.errors
        assert result.data is None

    def test_invalid_cursor(self, stitched, make_context):
        result = run(stitched, make_context, self.QUERY, {"after": "not-a-cursor"})
        assert result.errors
        assert "Invalid cursor" in result.errors[0].message


class TestSearch:
    def test_search_returns_union_members(self, stitched, make_context):
        result = run(
            stitched,
            make_context,
            """
            {
              search(text: "2") {
                __typename
                ... on Human { name }
                ... on Droid { name }
                ... on Starship { name length }
              }
            }
            """,
        )
        assert result.errors is None
        assert result.data == {"search": [{"__typename": "Droid", "name": "R2-D2"}]}

    def test_search_starship(self, stitched, make_context):
        result = run(
            stitched,
            make_context,
            '{ search(text: "tie") { __typename ... on Starship { name length } } }',
        )
        assert result.errors is None
        assert result.data == {
            "search": [{"__typename": "Starship", "name": "TIE Advanced x1", "length": 9.2}]
        }

    def test_starship_by_id(self, stitched, make_context):
        result = run(stitched, make_context, '{ starship(id: "3000") { name length(unit: FOOT) } }')
        assert result.errors is None
        assert result.data["starship"]["length"] == pytest.approx(9.2 * 3.28084)


class TestReviews:
    def test_reviews_come_from_repository(self, services, stitched, make_context):
        services.get(ReviewRepository).add_review(Episode.JEDI, Review(stars=4, commentary="Ewoks"))

        result = run(stitched, make_context, "{ reviews(episode: JEDI) { stars commentary } }")
        assert result.errors is None
        assert result.data == {"reviews": [{"stars": 4, "commentary": "Ewoks"}]}

    def test_no_reviews(self, stitched, make_context):
        result = run(stitched, make_context, "{ reviews(episode: EMPIRE) { stars } }")
        assert result.data == {"reviews": []}
