"""
Constants for the default inflection ruleset.

Rule tables are applied top to bottom with prepend semantics, so the LAST
entry of each table is the first one checked when transforming a word.
Entries with a third ``True`` element are exact (whole-word) rules.
"""

# Environment variable that points at an irregular-word document
INFLECT_PATH_ENV = "INFLECT_PATH"

# Looked up in the working directory when INFLECT_PATH is not set
DEFAULT_INFLECTIONS_FILENAME = "inflections.json"

YAML_SUFFIXES = (".yaml", ".yml")

# Characters that separate words in identifiers: snake_case, kebab-case,
# "spaced words" and scope:qualified names
SPACER_CHARS = frozenset("_ :-")

# Table prefix stripped by typeify ("schema.users" -> "users")
TABLE_PREFIX_PATTERN = r"^[^.]*\."

DEFAULT_PLURALS = [
    ("s", "s"),
    ("testis", "testes"),
    ("axis", "axes"),
    ("octopus", "octopi"),
    ("virus", "viri"),
    ("octopi", "octopi"),
    ("viri", "viri"),
    ("alias", "aliases"),
    ("status", "statuses"),
    ("Status", "Statuses"),
    ("bus", "buses"),
    ("buffalo", "buffaloes"),
    ("tomato", "tomatoes"),
    ("tum", "ta"),
    ("ium", "ia"),
    ("ta", "ta"),
    ("ia", "ia"),
    ("sis", "ses"),
    ("lf", "lves"),
    ("rf", "rves"),
    # consonant/vowel + "fe" -> "ves" (knife -> knives, safe -> saves)
    *[(f"{c}fe", f"{c}ves") for c in "abcdeghijklmnopqrstuvwxyz"],
    ("hive", "hives"),
    ("quy", "quies"),
    # consonant + "y" -> "ies" (category -> categories)
    *[(f"{c}y", f"{c}ies") for c in "bcdfghjklmnpqrstvwxz"],
    ("x", "xes"),
    ("ch", "ches"),
    ("ss", "sses"),
    ("sh", "shes"),
    ("matrix", "matrices"),
    ("vertix", "vertices"),
    ("indix", "indices"),
    ("matrex", "matrices"),
    ("vertex", "vertices"),
    ("index", "indices"),
    ("mouse", "mice"),
    ("louse", "lice"),
    ("mice", "mice"),
    ("lice", "lice"),
    ("ress", "resses"),
    ("ox", "oxen", True),
    ("oxen", "oxen", True),
    ("quiz", "quizzes", True),
]

DEFAULT_SINGULARS = [
    ("s", ""),
    ("ss", "ss"),
    ("news", "news"),
    ("ta", "tum"),
    ("ia", "ium"),
    ("analyses", "analysis"),
    ("bases", "basis"),
    ("basis", "basis", True),
    ("diagnoses", "diagnosis"),
    ("diagnosis", "diagnosis", True),
    ("parentheses", "parenthesis"),
    ("prognoses", "prognosis"),
    ("synopses", "synopsis"),
    ("theses", "thesis"),
    ("analyses", "analysis"),
    ("analysis", "analysis", True),
    *[(f"{c}ves", f"{c}fe") for c in "abcdeghijklmnopqrstuvwxyz"],
    ("hives", "hive"),
    ("tives", "tive"),
    ("lves", "lf"),
    ("rves", "rf"),
    ("quies", "quy"),
    *[(f"{c}ies", f"{c}y") for c in "bcdfghjklmnpqrstvwxz"],
    ("series", "series"),
    ("movies", "movie"),
    ("xes", "x"),
    ("ches", "ch"),
    ("sses", "ss"),
    ("shes", "sh"),
    ("mice", "mouse"),
    ("lice", "louse"),
    ("buses", "bus"),
    ("bus", "bus", True),
    ("oes", "o"),
    ("shoes", "shoe"),
    ("crises", "crisis"),
    ("crisis", "crisis", True),
    ("axes", "axis"),
    ("axis", "axis", True),
    ("testes", "testis"),
    ("testis", "testis", True),
    ("octopi", "octopus"),
    ("octopus", "octopus", True),
    ("viri", "virus"),
    ("virus", "virus", True),
    ("statuses", "status"),
    ("Statuses", "Status"),
    ("status", "status", True),
    ("Status", "Status", True),
    ("aliases", "alias"),
    ("alias", "alias", True),
    ("oxen", "ox", True),
    ("vertices", "vertex"),
    ("indices", "index"),
    ("matrices", "matrix"),
    ("quizzes", "quiz", True),
    ("databases", "database"),
    ("resses", "ress"),
    ("ress", "ress"),
]

DEFAULT_IRREGULARS = [
    ("person", "people"),
    ("man", "men"),
    ("child", "children"),
    ("sex", "sexes"),
    ("move", "moves"),
    ("zombie", "zombies"),
    ("Status", "Statuses"),
    ("status", "statuses"),
]

DEFAULT_UNCOUNTABLES = [
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
    "police",
]

# https://en.wikipedia.org/wiki/List_of_information_technology_acronyms
BASE_ACRONYMS = (
    "ACK,ACL,ADSL,AES,ANSI,API,ARP,ATM,BGP,BSS,CAT,CCITT,CHAP,CIDR,CIR,CLI,"
    "CPE,CPU,CRC,CRT,CSMA,CMOS,DCE,DEC,DES,DHCP,DNS,DRAM,DSL,DSLAM,DTE,DMI,"
    "EHA,EIA,EIGRP,EOF,ESS,FCC,FCS,FDDI,FTP,GBIC,gbps,GEPOF,HDLC,HTTP,HTTPS,"
    "IANA,ICMP,IDF,IDS,IEEE,IETF,IMAP,IP,IPS,ISDN,ISP,kbps,LACP,LAN,LAPB,LAPF,"
    "LLC,MAC,MAN,Mbps,MC,MDF,MIB,MoCA,MPLS,MTU,NAC,NAT,NBMA,NIC,NRZ,NRZI,"
    "NVRAM,OSI,OSPF,OUI,PAP,PAT,PC,PIM,PCM,PDU,POP3,POP,POST,POTS,PPP,PPTP,"
    "PTT,PVST,RADIUS,RAM,RARP,RFC,RIP,RLL,ROM,RSTP,RTP,RCP,SDLC,SFD,SFP,"
    "SLARP,SLIP,SMTP,SNA,SNAP,SNMP,SOF,SRAM,SSH,SSID,STP,SYN,TDM,TFTP,TIA,"
    "TOFU,UDP,URL,URI,USB,UTP,VC,VLAN,VLSM,VPN,W3C,WAN,WEP,WiFi,WPA,WWW"
)

DEFAULT_ACRONYMS = BASE_ACRONYMS.split(",")

# Latin lookalikes folded by asciify
ASCII_LOOKALIKES = {
    "A": "ÀÁÂÃÄÅ",
    "AE": "Æ",
    "C": "Ç",
    "E": "ÈÉÊË",
    "G": "Ğ",
    "I": "ÌÍÎÏİ",
    "N": "Ñ",
    "O": "ÒÓÔÕÖØ",
    "S": "Ş",
    "U": "ÙÚÛÜ",
    "Y": "Ý",
    "ss": "ß",
    "a": "àáâãäå",
    "ae": "æ",
    "c": "ç",
    "e": "èéêë",
    "g": "ğ",
    "i": "ìíîïı",
    "n": "ñ",
    "o": "òóôõöø",
    "s": "ş",
    "u": "ùúûüũūŭůűų",
    "y": "ýÿ",
}
