import unittest
from mealboard.domain.Ingredient import Ingredient
from mealboard.domain.Menu import Menu
from mealboard.domain.Recipe import Recipe, leading_minutes
from mealboard.tests.sample_data import CARBONARA, MENUS, PANCAKES


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.carbonara = Recipe.from_dict(CARBONARA)
        self.pancakes = Recipe.from_dict(PANCAKES)

    def test_from_dict_reads_camel_case_times(self):
        self.assertEqual(self.carbonara.prep_time, "10")
        self.assertEqual(self.carbonara.cook_time, "20")
        self.assertEqual(self.carbonara.total_minutes, 30)

    def test_total_minutes_uses_leading_integer(self):
        # "10 min" + "15"
        self.assertEqual(self.pancakes.total_minutes, 25)

    def test_leading_minutes(self):
        self.assertEqual(leading_minutes("20 min"), 20)
        self.assertEqual(leading_minutes(""), 0)
        self.assertEqual(leading_minutes("about 5"), 0)
        self.assertEqual(leading_minutes(None), 0)
        self.assertEqual(leading_minutes(12), 12)

    def test_string_ingredients_are_normalized(self):
        self.assertEqual(self.pancakes.ingredients[0], Ingredient("flour", 200, "g"))
        self.assertEqual(self.carbonara.ingredients[-1], Ingredient("black pepper"))

    def test_to_dict_writes_structured_ingredients(self):
        data = self.pancakes.to_dict()
        self.assertEqual(data["prepTime"], "10 min")
        self.assertEqual(data["ingredients"][1], {"name": "buttermilk", "quantity": 300, "unit": "ml"})

    def test_bad_servings(self):
        recipe = Recipe.from_dict({"name": "Soup", "servings": "many"})
        self.assertIsNone(recipe.servings)


class TestMenu(unittest.TestCase):

    def setUp(self):
        self.italian = Menu.from_dict(MENUS[0])
        self.empty = Menu.from_dict(MENUS[2])

    def test_derived_values_come_from_recipes(self):
        # carbonara 10+20, salad 15+0
        self.assertEqual(self.italian.total_minutes, 45)
        self.assertEqual(self.italian.servings, 2)
        self.assertEqual(self.italian.cover_image, "https://img.test/carbonara.jpg")
        self.assertEqual(self.italian.recipe_names(), ["Spaghetti Carbonara", "Greek Salad"])

    def test_empty_menu(self):
        self.assertEqual(self.empty.total_minutes, 0)
        self.assertIsNone(self.empty.servings)
        self.assertIsNone(self.empty.cover_image)

    def test_summary(self):
        summary = self.italian.summary()
        self.assertEqual(summary["id"], "m-italian")
        self.assertEqual(summary["total_minutes"], 45)
        self.assertEqual(summary["recipe_names"], ["Spaghetti Carbonara", "Greek Salad"])


if __name__ == '__main__':
    unittest.main()
