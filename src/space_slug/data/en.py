"""English word lists."""

seasons = ["spring", "summer", "autumn", "fall", "winter"]

adjectives = [
    "agile",
    "ancient",
    "bold",
    "brave",
    "breezy",
    "bright",
    "brisk",
    "calm",
    "careful",
    "cheerful",
    "clever",
    "cosmic",
    "curious",
    "daring",
    "dazzling",
    "eager",
    "electric",
    "elegant",
    "fearless",
    "fluffy",
    "friendly",
    "gentle",
    "giant",
    "glowing",
    "golden",
    "graceful",
    "happy",
    "hidden",
    "humble",
    "jolly",
    "keen",
    "kind",
    "lively",
    "lucky",
    "magic",
    "merry",
    "mighty",
    "misty",
    "nimble",
    "noble",
    "patient",
    "playful",
    "polite",
    "proud",
    "quick",
    "quiet",
    "radiant",
    "rapid",
    "rustic",
    "shiny",
    "silent",
    "silly",
    "sleepy",
    "smart",
    "snowy",
    "sparkling",
    "speedy",
    "steady",
    "stellar",
    "sunny",
    "swift",
    "tidy",
    "tiny",
    "vivid",
    "warm",
    "wild",
    "wise",
    "witty",
    "young",
    "zealous",
]

nouns = [
    "anchor",
    "arrow",
    "beacon",
    "bridge",
    "canyon",
    "castle",
    "cloud",
    "compass",
    "crystal",
    "delta",
    "desert",
    "diamond",
    "ember",
    "engine",
    "feather",
    "forest",
    "fountain",
    "garden",
    "glacier",
    "harbor",
    "horizon",
    "island",
    "journey",
    "jungle",
    "lagoon",
    "lantern",
    "meadow",
    "mirror",
    "mountain",
    "ocean",
    "orchard",
    "paper",
    "pebble",
    "pillow",
    "puzzle",
    "quartz",
    "rainbow",
    "river",
    "rocket",
    "saddle",
    "shadow",
    "signal",
    "spark",
    "summit",
    "thunder",
    "tower",
    "valley",
    "voyage",
    "whisper",
    "window",
]

colors = [
    "amber",
    "aqua",
    "azure",
    "beige",
    "black",
    "blue",
    "bronze",
    "coral",
    "crimson",
    "cyan",
    "emerald",
    "gold",
    "gray",
    "green",
    "indigo",
    "ivory",
    "jade",
    "lavender",
    "lilac",
    "lime",
    "magenta",
    "maroon",
    "navy",
    "olive",
    "orange",
    "peach",
    "pink",
    "plum",
    "purple",
    "red",
    "ruby",
    "salmon",
    "sapphire",
    "scarlet",
    "silver",
    "teal",
    "turquoise",
    "violet",
    "white",
    "yellow",
]

animals = [
    "badger",
    "bear",
    "beaver",
    "bison",
    "camel",
    "cheetah",
    "cobra",
    "coyote",
    "crane",
    "dolphin",
    "eagle",
    "falcon",
    "ferret",
    "fox",
    "gecko",
    "giraffe",
    "heron",
    "hippo",
    "ibis",
    "jaguar",
    "koala",
    "lemur",
    "leopard",
    "lion",
    "llama",
    "lynx",
    "moose",
    "narwhal",
    "ocelot",
    "octopus",
    "otter",
    "owl",
    "panda",
    "panther",
    "parrot",
    "penguin",
    "puffin",
    "rabbit",
    "raccoon",
    "raven",
    "salmon",
    "seal",
    "sparrow",
    "squid",
    "swan",
    "tiger",
    "toucan",
    "turtle",
    "walrus",
    "wolf",
    "wombat",
    "yak",
    "zebra",
]

verbs = [
    "bounce",
    "build",
    "carry",
    "chase",
    "climb",
    "dance",
    "dash",
    "dive",
    "drift",
    "explore",
    "float",
    "fly",
    "gather",
    "glide",
    "glow",
    "hover",
    "jump",
    "launch",
    "leap",
    "orbit",
    "paint",
    "race",
    "roam",
    "run",
    "sail",
    "shine",
    "sing",
    "skip",
    "soar",
    "spin",
    "sprint",
    "swim",
    "travel",
    "twirl",
    "wander",
    "whistle",
    "zoom",
]

cosmos = [
    "andromeda",
    "apollo",
    "asteroid",
    "astro",
    "aurora",
    "cassini",
    "celestial",
    "comet",
    "constellation",
    "corona",
    "cosmos",
    "eclipse",
    "equinox",
    "galaxy",
    "gemini",
    "halo",
    "hubble",
    "jupiter",
    "kepler",
    "lunar",
    "mars",
    "mercury",
    "meteor",
    "milkyway",
    "moon",
    "nebula",
    "neptune",
    "nova",
    "orbit",
    "orion",
    "planet",
    "pluto",
    "pulsar",
    "quasar",
    "rocket",
    "saturn",
    "satellite",
    "solar",
    "starlight",
    "stardust",
    "sun",
    "supernova",
    "telescope",
    "uranus",
    "venus",
    "voyager",
    "zenith",
]
