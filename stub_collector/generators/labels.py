"""Human-plausible labels and free text for transactions and items."""

from __future__ import annotations

import string

from stub_collector.generators.base import BaseGenerator


class LabelGenerator(BaseGenerator):
    """Generate bank statement labels, details and product names.

    Labels look like what a French bank prints on a statement::

        Paiement CB Fnac Lyon (K3Z0A81BQ2)
    """

    OPERATION_KINDS = [
        "Paiement CB",
        "Retrait DAB",
        "Virement reçu",
        "Virement émis",
        "Prélèvement",
        "Remboursement",
        "Achat en ligne",
        "Facture",
        "Crédit sur compte",
        "Abonnement",
    ]

    MERCHANTS = [
        "Amazon",
        "Carrefour",
        "Fnac",
        "Uber",
        "Netflix",
        "Airbnb",
        "Apple Store",
        "Boulanger",
        "Auchan",
        "Cdiscount",
    ]

    CITIES = [
        "Paris",
        "Lyon",
        "Marseille",
        "Bordeaux",
        "Toulouse",
        "Lille",
        "Nice",
        "Strasbourg",
        "Nantes",
        "Montpellier",
    ]

    WORDS = [
        "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing",
        "elit", "sed", "do", "eiusmod", "tempor", "incididunt", "ut", "labore",
        "et", "dolore", "magna", "aliqua", "enim", "ad", "minim", "veniam",
        "quis", "nostrud", "exercitation", "ullamco", "laboris", "nisi",
        "aliquip", "ex", "ea", "commodo", "consequat", "duis", "aute", "irure",
        "in", "reprehenderit", "voluptate", "velit", "esse", "cillum", "eu",
        "fugiat", "nulla", "pariatur", "excepteur", "sint", "occaecat",
        "cupidatat", "non", "proident", "sunt", "culpa", "qui", "officia",
        "deserunt", "mollit", "anim", "id", "est", "laborum",
    ]

    PRODUCTS = [
        # High-tech
        "Laptop", "Gaming Laptop", "Wireless Bluetooth Earbuds", "Smartphone",
        "Ultra HD 4K Smart TV", "Gaming Keyboard", "Wireless Mouse",
        "Mechanical Keyboard", "External SSD 1TB", "Professional DSLR Camera",
        "Smartwatch with Heart Monitor", "Portable Bluetooth Speaker",
        "High-Speed WiFi Router", "Digital Drawing Tablet", "Noise Cancelling Headphones",
        # Home appliances
        "Electric Kettle", "Microwave Oven", "Smart LED Light Bulb",
        "Robot Vacuum Cleaner", "Wireless Charging Pad", "Air Fryer XL",
        "Automatic Coffee Machine", "Smart Door Lock with Fingerprint Scanner",
        # Clothing
        "Men's Leather Jacket", "Women's Summer Dress", "Casual Sneakers",
        "Running Shoes", "Designer Handbag", "Unisex Hoodie", "Formal Suit",
        "Slim Fit Jeans", "Winter Boots", "Athletic T-Shirt", "Cotton Sweatpants",
        # Beauty
        "Luxury Eau de Parfum", "Fresh Citrus Cologne", "Rose Scented Body Mist",
        "Vanilla and Musk Perfume", "Men's Aftershave Balm", "Organic Face Cream",
        "Aloe Vera Moisturizer", "Exfoliating Body Scrub", "Red Matte Lipstick",
        # Toys
        "LEGO City Set", "Remote Control Car", "Plush Teddy Bear",
        "Educational Wooden Puzzle", "Dinosaur Action Figure", "Barbie Doll House",
        "Interactive Talking Robot", "Baby Stroller", "Kids Play Tent",
        "Board Game: Monopoly", "Musical Toy Piano",
        # Food & drinks
        "Organic Honey 500g", "Italian Roasted Coffee Beans", "Dark Chocolate Bar",
        "Gourmet Olive Oil 1L", "Freshly Baked Croissant Pack", "Almond & Oat Granola",
        "Bottle of Red Wine", "Japanese Matcha Green Tea", "Premium Sushi Rice",
        "Handmade Raspberry Jam", "Spicy BBQ Sauce", "Vegan Protein Powder",
        # Misc
        "Yoga Mat with Carry Strap", "Waterproof Hiking Backpack", "Luxury Bath Towel Set",
        "Portable Camping Stove", "Rechargeable LED Flashlight", "Hardcover Travel Journal",
    ]

    REFERENCE_LENGTH = 10

    def operation_label(self) -> str:
        """Statement label: ``<kind> <merchant> <city> (<reference>)``."""
        kind = self.sampler.choice(self.OPERATION_KINDS)
        merchant = self.sampler.choice(self.MERCHANTS)
        city = self.sampler.choice(self.CITIES)
        return f"{kind} {merchant} {city} ({self.reference()})"

    def operation_details(self, word_count: int = 15) -> str:
        """Lorem-ipsum sentence of ``word_count`` words, capitalized, with a final period."""
        if word_count <= 0:
            return ""
        return self.fake.sentence(
            nb_words=word_count,
            variable_nb_words=False,
            ext_word_list=self.WORDS,
        )

    def product_name(self) -> str:
        return self.sampler.choice(self.PRODUCTS)

    def reference(self) -> str:
        """Random reference, each character an uppercase letter or a digit."""
        chars = []
        for _ in range(self.REFERENCE_LENGTH):
            if self.rng.random() < 0.5:
                chars.append(self.sampler.choice(string.ascii_uppercase))
            else:
                chars.append(self.sampler.choice(string.digits))
        return "".join(chars)
