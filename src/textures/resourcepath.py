ASSETS_PATH: str = "./assets/"
GRAPHICS_PATH: str = ASSETS_PATH + "graphics/"
FONTS_PATH: str = ASSETS_PATH + "fonts/"
SOUNDS_PATH: str = ASSETS_PATH + "sounds/"

# Sprites
PLAYER_TEXTURE_PATH: str = GRAPHICS_PATH + "soon.png"
BOX_TEXTURE_PATH: str = GRAPHICS_PATH + "box.png"
BACKGROUND_TEXTURE_PATH: str = GRAPHICS_PATH + "background.png"
PILL_TEXTURE_PATH: str = GRAPHICS_PATH + "pill.png"

# Fonts
MANIA_FONT_PATH: str = FONTS_PATH + "mania.ttf"

# Sounds
RACING_SOUND_PATH: str = SOUNDS_PATH + "racing.mp3"
DESTROY_SOUND_PATH: str = SOUNDS_PATH + "destroy.mp3"
JUMP_SOUND_PATH: str = SOUNDS_PATH + "jump.mp3"
COLLECT_SOUND_PATH: str = SOUNDS_PATH + "collect.mp3"
