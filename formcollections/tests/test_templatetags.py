from collections import namedtuple

from bs4 import BeautifulSoup
from django.template import Context, Template
from django.test import SimpleTestCase

Category = namedtuple("Category", ["id", "name"])


def _render(source, **context):
    html = Template("{% load formcollections_tags %}" + source).render(Context(context))
    return BeautifulSoup(html, "html.parser")


class CollectionTagsTest(SimpleTestCase):
    def test_radio_buttons_tag(self):
        soup = _render(
            '{% collection_radio_buttons "user" "active" choices 0 1 checked=current class="radio" %}',
            choices=[("y", "Yes"), ("n", "No")],
            current="n",
        )

        self.assertEqual([tag["id"] for tag in soup.select("input.radio[type=radio]")], ["user_active_y", "user_active_n"])
        self.assertEqual([tag["value"] for tag in soup.select("input[checked=checked]")], ["n"])
        self.assertEqual(soup.select_one("label[for=user_active_y]").get_text(), "Yes")

    def test_check_boxes_tag(self):
        soup = _render(
            '{% collection_check_boxes "user" "category_ids" categories "id" "name" disabled=locked data_role="pick" %}',
            categories=[Category(1, "Category 1"), Category(2, "Category 2")],
            locked=[2],
        )

        self.assertEqual(len(soup.select("input[type=checkbox][data-role=pick]")), 2)
        self.assertEqual([tag["value"] for tag in soup.select("input[disabled=disabled]")], ["2"])
        self.assertEqual(len(soup.select("input[type=hidden]")), 1)

    def test_output_is_not_double_escaped(self):
        soup = _render('{% collection_radio_buttons "user" "active" choices %}', choices=["a & b"])

        self.assertEqual(soup.select_one("label").get_text(), "a & b")
