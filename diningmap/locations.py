"""Hand-maintained data for the eateries page.

These values describe the page as it was when the offsets were surveyed.
If the listing changes, re-run ``links`` to find the new row range and add
offsets for any new location.
"""

from __future__ import annotations

from diningmap.pipeline.corrector import CorrectionTable

# Anchors inside the eatery block that are not eateries.
EXCLUDED_LABELS: frozenset[str] = frozenset({
    "Convenience Stores",
    "Dining Now",
})

# (label, latitude offset, longitude offset), in page order.
# latitude = round(lat) + offset, longitude = round(lon) - offset.
CORRECTION_PAIRS: tuple[tuple[str, float, float], ...] = (
    ("104West!", 0.4441, 0.4895),
    ("Amit Bhatia Libe Café", 0.4478, 0.4852),
    ("Atrium Café", 0.4453, 0.4823),
    ("Bear Necessities Grill & C-Store", 0.4553, 0.4780),
    ("Becker House Dining Room", 0.4471, 0.4893),
    ("Big Red Barn", 0.4465, 0.4799),
    ("Bus Stop Bagels", 0.4437, 0.4810),
    ("Café Jennie", 0.4475, 0.4790),
    ("Carol's Café", 0.4549, 0.4791),
    ("Cook House Dining Room", 0.4475, 0.4900),
    ("Cornell Dairy Bar", 0.4479, 0.4690),
    ("Crossings Café", 0.4494, 0.4905),
    ("Franny's", 0.4466, 0.4761),
    ("Goldie's Café", 0.4476, 0.4816),
    ("Green Dragon", 0.4510, 0.4841),
    ("Ivy Room", 0.4466, 0.4853),
    ("Jansen's Dining Room at Bethe House", 0.4472, 0.4888),
    ("Jansen's Market", 0.4473, 0.4886),
    ("Keeton House Dining Room", 0.4470, 0.4897),
    ("Mann Café", 0.4488, 0.4764),
    ("Martha's Café", 0.4490, 0.4726),
    ("Mattin's Café", 0.4448, 0.4826),
    ("McCormick's at Moakley House", 0.4521, 0.4631),
    ("North Star Dining Room", 0.4529, 0.4778),
    ("Okenshields", 0.4465, 0.4857),
    ("Risley Dining Room", 0.4532, 0.4818),
    ("Rose House Dining Room", 0.4476, 0.4881),
    ("Rusty's", 0.4466, 0.4852),
    ("Straight from the Market", 0.4467, 0.4855),
    ("Trillium", 0.4480, 0.4791),
)

CORRECTIONS = CorrectionTable.from_pairs(CORRECTION_PAIRS)
