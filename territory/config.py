"""Game configuration: playfield size, timing, costs and asset paths."""

# Playfield
GAME_WIDTH = 544  # width of the battle map
GAME_WIDTH_1 = 694  # full window width, map plus shop column
GAME_HEIGHT = 819
GAME_TITLE = "领地之争 v1.0"
GAME_RATE = 80  # tick interval in milliseconds
GAME_TIME = 1000  # number of ticks before the game is lost
GAME_WIN = 50  # remaining live blocks at or below which the game is won
GAME_V = 15  # standard speed in pixels per tick

# Background and shop images
MAP_PATH = "pictures/01-background-blue"
CARD_PATH = "pictures/51-card.png"
SHOP_SUN_PATH = "pictures/52-cardshop-sun.png"
SHOP_CARD_PATH = "pictures/53-cardshop.png"
START_MAP_PATH = "pictures/000-start"
WIN_MAP_PATH = "pictures/999-win_image.png"
LOSE_MAP_PATH = "pictures/999-lose_image.png"
ICON_PATH = "pictures/00-icon.png"
START_BUTTON_PATH = "pictures/000-startbutton.png"
CLOSE_BUTTON_PATH = "pictures/999-closebutton.png"
PLANT_CARD_WIDTH = 80
PLANT_CARD_HEIGHT = 100

# Sun
SUN_PATH = "pictures/61-Sun.gif"
SUN_SUM0 = 200  # starting sun
SUN_VALUE = 25  # sun gained per collected sun
SUN_INTERVAL = 4000  # milliseconds between sun spawns
MAX_BUTTONS = 3  # maximum number of suns on screen at once
BUTTON_SIZE = 78

# Buttons
BUTTON_WID = 100

# Red blocks
BLOCK_PATH = "pictures/02-block-red"
BLOCK_NUM = 288
BLOCK_COLUMNS = 18
BLOCK_SPACING = 30

# Dark red blocks
DBLOCK_PATH = "pictures/03-block-darkred.png"
DBLOCK_NUM = 200

# Bullets
BULLET_PATH = "pictures/04-bullet"
BULLET_INTERVAL = 15  # ticks between shots

# Single-shot cannon
CANNON1_PATH = "pictures/11-cannon-1"
CANNON1_BULLET_NUM = 36
CANNON1_COST = 100
CANNON1_COOLDOWN = 5000

# Triple-shot cannon
CANNON3_PATH = "pictures/12-cannon-3"
CANNON3_COST = 200
CANNON3_BULLET_NUM_1 = 36
CANNON3_BULLET_NUM_2 = 36
CANNON3_BULLET_NUM_3 = 36
CANNON3_COOLDOWN = 5000

# Wheel
WHEEL_PATH = "pictures/21-wheel"
WHEEL_COST = 150
WHEEL_COOLDOWN = 5000

# Enemy plane and cloud
ENEMY_PLANE_PATH = "pictures/31-warplane-red"
CLOUD_PATH = "pictures/41-cloud"

# Default sprite dimensions (width, height) used for hit boxes and drawing
BULLET_SIZE = (24, 24)
BLOCK_SIZE = (30, 30)
DBLOCK_SIZE = (30, 30)
CANNON1_SIZE = (100, 100)
CANNON3_SIZE = (120, 100)
WHEEL_SIZE = (120, 60)
ENEMY_PLANE_SIZE = (120, 90)
CLOUD_SIZE = (200, 120)
SUN_SIZE = (BUTTON_SIZE, BUTTON_SIZE)