import unittest
from mealboard.domain.Menu import Menu
from mealboard.domain.Recipe import Recipe
from mealboard.logic.menus.search import filter_menus, filter_recipes, menu_matches, recipe_categories
from mealboard.tests.sample_data import CARBONARA, MENUS, PANCAKES, SALAD


class TestMenuSearch(unittest.TestCase):

    def setUp(self):
        self.menus = [Menu.from_dict(m) for m in MENUS]

    def test_empty_term_keeps_everything(self):
        self.assertEqual(filter_menus(self.menus, ""), self.menus)

    def test_match_by_name_case_insensitive(self):
        self.assertEqual([m.id for m in filter_menus(self.menus, "LAZY")], ["m-sunday"])

    def test_match_by_description(self):
        self.assertEqual([m.id for m in filter_menus(self.menus, "fridge")], ["m-empty"])

    def test_match_by_recipe_name_only(self):
        # "carbonara" is neither in the menu name nor its description
        self.assertEqual([m.id for m in filter_menus(self.menus, "carbonara")], ["m-italian"])
        self.assertTrue(menu_matches(self.menus[1], "pancakes"))

    def test_no_match(self):
        self.assertEqual(filter_menus(self.menus, "sushi"), [])


class TestRecipeSearch(unittest.TestCase):

    def setUp(self):
        self.recipes = [Recipe.from_dict(r) for r in (CARBONARA, SALAD, PANCAKES)]

    def test_filter_by_term(self):
        self.assertEqual([r.id for r in filter_recipes(self.recipes, "greek")], ["r-salad"])

    def test_filter_by_category(self):
        self.assertEqual([r.id for r in filter_recipes(self.recipes, category="breakfast")], ["r-pancakes"])
        self.assertEqual(filter_recipes(self.recipes, "carbonara", "Lunch"), [])

    def test_categories(self):
        self.assertEqual(recipe_categories(self.recipes), ["Breakfast", "Dinner", "Lunch"])


if __name__ == '__main__':
    unittest.main()
