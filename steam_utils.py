# steam_utils.py
# Helpers for the Steam Web API JSON envelope


def as_list(x):
    if x is None:
        return []
    if isinstance(x, list):
        return x
    return [x]


def response_node(data):
    """
    Unwrap the {"response": {...}} envelope.
    Always returns a dict (or {}).
    """
    if not isinstance(data, dict):
        return {}
    node = data.get("response")
    return node if isinstance(node, dict) else {}


def as_minutes(value):
    if value is None or value == "":
        return 0
    return int(value)


def normalize_game(node):
    """
    Pull appid, name and both playtime counters out of one game node.
    Returns None when the node carries no appid.
    """
    if not isinstance(node, dict) or node.get("appid") is None:
        return None
    return {
        "id": str(int(node["appid"])),
        "name": node.get("name") or "",
        "playtime_2weeks": as_minutes(node.get("playtime_2weeks")),
        "playtime_forever": as_minutes(node.get("playtime_forever")),
    }


def extract_games(data):
    games = []
    for node in as_list(response_node(data).get("games")):
        game = normalize_game(node)
        if game is not None:
            games.append(game)
    return games
