"""Word lists for cute slugs (adjective + noun, e.g. 'sweetpotato')."""

ADJECTIVES = [
    "sweet", "happy", "sunny", "cozy", "gentle", "bright", "calm", "fresh",
    "warm", "soft", "cool", "smart", "kind", "quick", "brave", "funny",
    "fluffy", "bouncy", "sparkly", "dreamy", "magical", "lovely", "cheerful",
    "adorable", "bubbly", "giggly", "snuggly", "cuddly", "fuzzy", "tiny",
    "mini", "jolly", "merry", "glad", "peppy", "pretty", "cute", "shiny",
    "silly", "witty", "zesty", "comfy", "dainty", "perky", "rosy", "sunlit",
]

NOUNS = [
    "potato", "panda", "cloud", "moon", "star", "tree", "bird", "cat",
    "flower", "river", "mountain", "book", "coffee", "cookie", "dream", "song",
    "butterfly", "rainbow", "unicorn", "cupcake", "kitten", "puppy", "bunny",
    "dolphin", "otter", "koala", "penguin", "hedgehog", "muffin", "pickle",
    "rose", "daisy", "lily", "cherry", "peach", "honey", "sugar", "candy",
    "cotton", "wish", "acorn", "bean", "duck", "fox", "owl", "pebble",
]

# Substrings that earn bonus cuteness points
CUTE_WORDS = [
    "fluffy", "sparkly", "bubbly", "giggly", "snuggly", "cuddly", "fuzzy", "cozy",
    "sweet", "lovely", "pretty", "cute", "tiny", "mini", "soft", "warm",
    "happy", "sunny", "bright", "cheerful", "jolly", "merry", "glad", "peppy",
    "kitten", "puppy", "bunny", "panda", "unicorn", "rainbow", "star", "moon",
    "flower", "rose", "daisy", "lily", "cherry", "peach", "honey", "sugar",
    "cookie", "cupcake", "candy", "marshmallow", "cotton", "cloud", "dream", "wish",
]

# Pool seed, handed out before the first replenish completes
SEED_SLUGS = [
    "adorableAnt", "beamingBear", "cuddlyCat", "dapperDog", "elegantElephant",
    "fluffyFox", "gigglingGiraffe", "happyHippo", "innocentIguana", "jollyJaguar",
    "kindKoala", "laughingLion", "merryMonkey", "nobleNewt", "optimisticOtter",
    "playfulPanda", "quirkyQuokka", "radiantRabbit", "smilingSloth", "tinyTiger",
    "uniqueUnicorn", "vibrantVole", "wittyWalrus", "youthfulYak", "zestyZebra",
]
