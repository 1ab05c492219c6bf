"""Named constants for IRC verbs and numeric replies.

The codec never interprets these; they exist so callers can compare
``message.verb`` against names instead of bare strings::

    if message.verb == Verb.PRIVMSG: ...
    if message.verb == RPL.WELCOME: ...
"""

from __future__ import annotations

from enum import StrEnum


class Verb(StrEnum):
    """Command names; every member's value is its own name."""

    ADMIN = "ADMIN"
    AUTHENTICATE = "AUTHENTICATE"
    AWAY = "AWAY"
    BATCH = "BATCH"
    CAP = "CAP"
    CHGHOST = "CHGHOST"
    CONNECT = "CONNECT"
    ERROR = "ERROR"
    HELP = "HELP"
    INFO = "INFO"
    INVITE = "INVITE"
    ISON = "ISON"
    JOIN = "JOIN"
    KICK = "KICK"
    KILL = "KILL"
    LINKS = "LINKS"
    LIST = "LIST"
    LUSERS = "LUSERS"
    MODE = "MODE"
    MOTD = "MOTD"
    NAMES = "NAMES"
    NICK = "NICK"
    NOTICE = "NOTICE"
    OPER = "OPER"
    PART = "PART"
    PASS = "PASS"
    PING = "PING"
    PONG = "PONG"
    PRIVMSG = "PRIVMSG"
    QUIT = "QUIT"
    REHASH = "REHASH"
    RESTART = "RESTART"
    SETNAME = "SETNAME"
    SQUIT = "SQUIT"
    STATS = "STATS"
    TAGMSG = "TAGMSG"
    TIME = "TIME"
    TOPIC = "TOPIC"
    USER = "USER"
    USERHOST = "USERHOST"
    VERSION = "VERSION"
    WALLOPS = "WALLOPS"
    WHO = "WHO"
    WHOIS = "WHOIS"
    WHOWAS = "WHOWAS"


class RPL(StrEnum):
    """Numeric replies (``RPL_*``), valued by their three digit code."""

    WELCOME = "001"
    YOURHOST = "002"
    CREATED = "003"
    MYINFO = "004"
    ISUPPORT = "005"
    BOUNCE = "010"
    UMODEIS = "221"
    LUSERCLIENT = "251"
    LUSEROP = "252"
    LUSERUNKNOWN = "253"
    LUSERCHANNELS = "254"
    LUSERME = "255"
    ADMINME = "256"
    ADMINLOC1 = "257"
    ADMINLOC2 = "258"
    ADMINEMAIL = "259"
    TRYAGAIN = "263"
    LOCALUSERS = "265"
    GLOBALUSERS = "266"
    WHOISCERTFP = "276"
    NONE = "300"
    AWAY = "301"
    USERHOST = "302"
    ISON = "303"
    UNAWAY = "305"
    NOWAWAY = "306"
    WHOISREGNICK = "307"
    WHOISUSER = "311"
    WHOISSERVER = "312"
    WHOISOPERATOR = "313"
    WHOWASUSER = "314"
    ENDOFWHO = "315"
    WHOISIDLE = "317"
    ENDOFWHOIS = "318"
    WHOISCHANNELS = "319"
    WHOISSPECIAL = "320"
    LISTSTART = "321"
    LIST = "322"
    LISTEND = "323"
    CHANNELMODEIS = "324"
    CREATIONTIME = "329"
    WHOISACCOUNT = "330"
    NOTOPIC = "331"
    TOPIC = "332"
    TOPICWHOTIME = "333"
    INVITELIST = "336"
    ENDOFINVITELIST = "337"
    WHOISACTUALLY = "338"
    INVITING = "341"
    INVEXLIST = "346"
    ENDOFINVEXLIST = "347"
    EXCEPTLIST = "348"
    ENDOFEXCEPTLIST = "349"
    VERSION = "351"
    WHOREPLY = "352"
    NAMREPLY = "353"
    LINKS = "364"
    ENDOFLINKS = "365"
    ENDOFNAMES = "366"
    BANLIST = "367"
    ENDOFBANLIST = "368"
    ENDOFWHOWAS = "369"
    INFO = "371"
    MOTD = "372"
    ENDOFINFO = "374"
    MOTDSTART = "375"
    ENDOFMOTD = "376"
    WHOISHOST = "378"
    WHOISMODES = "379"
    YOUREOPER = "381"
    REHASHING = "382"
    TIME = "391"
    HELPSTART = "704"
    HELPTXT = "705"
    ENDOFHELP = "706"
    STARTTLS = "670"
    WHOISSECURE = "671"
    LOGGEDIN = "900"
    LOGGEDOUT = "901"
    SASLSUCCESS = "903"
    SASLMECHS = "908"


class ERR(StrEnum):
    """Numeric errors (``ERR_*``), valued by their three digit code."""

    UNKNOWNERROR = "400"
    NOSUCHNICK = "401"
    NOSUCHSERVER = "402"
    NOSUCHCHANNEL = "403"
    CANNOTSENDTOCHAN = "404"
    TOOMANYCHANNELS = "405"
    WASNOSUCHNICK = "406"
    NOORIGIN = "409"
    NORECIPIENT = "411"
    NOTEXTTOSEND = "412"
    INPUTTOOLONG = "417"
    UNKNOWNCOMMAND = "421"
    NOMOTD = "422"
    NONICKNAMEGIVEN = "431"
    ERRONEUSNICKNAME = "432"
    NICKNAMEINUSE = "433"
    NICKCOLLISION = "436"
    USERNOTINCHANNEL = "441"
    NOTONCHANNEL = "442"
    USERONCHANNEL = "443"
    NOTREGISTERED = "451"
    NEEDMOREPARAMS = "461"
    ALREADYREGISTERED = "462"
    PASSWDMISMATCH = "464"
    YOUREBANNEDCREEP = "465"
    CHANNELISFULL = "471"
    UNKNOWNMODE = "472"
    INVITEONLYCHAN = "473"
    BANNEDFROMCHAN = "474"
    BADCHANNELKEY = "475"
    BADCHANMASK = "476"
    NOPRIVILEGES = "481"
    CHANOPRIVSNEEDED = "482"
    CANTKILLSERVER = "483"
    NOOPERHOST = "491"
    UMODEUNKNOWNFLAG = "501"
    USERSDONTMATCH = "502"
    HELPNOTFOUND = "524"
    INVALIDKEY = "525"
    STARTTLS = "691"
    INVALIDMODEPARAM = "696"
    NOPRIVS = "723"
    NICKLOCKED = "902"
    SASLFAIL = "904"
    SASLTOOLONG = "905"
    SASLABORTED = "906"
    SASLALREADY = "907"


_NUMERIC_NAMES: dict[str, str] = {
    **{member.value: f"ERR_{member.name}" for member in ERR},
    **{member.value: f"RPL_{member.name}" for member in RPL},
}


def numeric_name(code: str) -> str | None:
    """Return ``RPL_<NAME>``/``ERR_<NAME>`` for a numeric verb, or ``None``."""
    return _NUMERIC_NAMES.get(code)
