from utils.product_lines import ProductLine, ProductLineClassifier, discover_feed_products


def test_discovers_feed_names_from_feed_category_purchases(purchase):
    purchases = [
        purchase("2024-03-01", category="Pashu Aahar", product_name="Gold Coin Feed"),
        purchase("2024-03-01", category="pashu aahar", product_name="  Super Pallet "),
        purchase("2024-03-01", category="Ghee", product_name="Desi Ghee", unit="Kg"),
        purchase("2024-03-01", category="Pashu Aahar", product_name=""),
    ]
    assert discover_feed_products(purchases) == {"gold coin feed", "super pallet"}


def test_classify_fixed_names_need_matching_unit():
    classifier = ProductLineClassifier()
    assert classifier.classify("Ltr", "Milk") == ProductLine.MILK
    assert classifier.classify("ltr", "MILK") == ProductLine.MILK
    assert classifier.classify("Kg", "milk") == ProductLine.OTHER
    assert classifier.classify("Kg", "Ghee") == ProductLine.GHEE
    assert classifier.classify("Ltr", "Ghee") == ProductLine.OTHER


def test_classify_feed_uses_discovered_vocabulary():
    classifier = ProductLineClassifier(["Gold Coin Feed"])
    assert classifier.classify("Bags", "gold coin feed") == ProductLine.PASHU_AAHAR
    assert classifier.classify("Bags", "Nutri Plus Feed") == ProductLine.OTHER
    assert classifier.classify("Kg", "Gold Coin Feed") == ProductLine.OTHER
    # names carrying the feed marker are always feed
    assert classifier.classify("Bags", "Special Pashu Aahar") == ProductLine.PASHU_AAHAR


def test_classify_purchase_prefers_category():
    classifier = ProductLineClassifier()
    assert classifier.classify_purchase("Ghee", "Tin", "Amul") == ProductLine.GHEE
    assert classifier.classify_purchase("Other", "Kg", "ghee") == ProductLine.GHEE
    assert classifier.classify_purchase("Pashu Aahar", "Bags", "Anything") == ProductLine.PASHU_AAHAR
    assert classifier.classify_purchase("Stationery", "Box", "Pens") == ProductLine.OTHER
    assert classifier.classify_purchase("", "Ltr", "Milk") == ProductLine.OTHER


def test_from_purchases(purchase):
    classifier = ProductLineClassifier.from_purchases([purchase("2024-03-01", product_name="Super Pallet")])
    assert classifier.is_feed_product("super pallet")
    assert not classifier.is_feed_product("")
