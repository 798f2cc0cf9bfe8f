"""
Synonym Catalog Data
Bilingual (Spanish/English) product vocabulary as found across retailer listings.

Each entry has ``synonyms`` (matched against normalized query phrases of up to
three tokens), ``alternatives`` (text-search lexeme patterns, ``:*`` is a prefix
match) and optionally an ``id`` (referenceable) or ``refs`` (composite meaning).
"""

SYNONYM_ENTRIES = [
    {"synonyms": ["congelado", "congelada", "frozen", "cong"], "alternatives": ["cong:*", "frozen:*"]},
    {"synonyms": ["sopa instantanea", "ramen"], "alternatives": ["sopa:* & instantanea:*", "ramen:*"]},
    {"synonyms": ["sin", "free", "zero", "non", "cero", "0"], "alternatives": ["sin", "s", "free:*", "zero", "non", "cero", "0", "libre"], "id": "sin"},
    {"synonyms": ["lactosa", "lacteo", "dairy"], "alternatives": ["lactosa:*", "lacteo:*", "dair:*"], "id": "lact"},
    {"synonyms": ["deslactosada", "deslactosado"], "refs": ["sin", "lact"], "alternatives": ["deslactosad:*"]},
    {"synonyms": ["rebanado", "rebanada", "slice", "rodaja", "en & mitad", "mitade", "sliced", "partido", "trozo", "reb", "cortado", "cortada"], "alternatives": ["reb:*", "slice:*", "rodaj:*", "en & mitad:*", "mitade:*", "partid:*", "troz:*", "cortad:*"]},
    {"synonyms": ["rucula", "arrugula"], "alternatives": ["rucula:*", "arrugula:*"]},
    {"synonyms": ["menta", "mint"], "alternatives": ["ment:*", "mint:*"]},
    {"synonyms": ["new york", "ny"], "alternatives": ["new <-> york", "ny"]},
    {"synonyms": ["queso", "cheese"], "alternatives": ["ques:*", "chees:*"], "id": "queso"},
    {"synonyms": ["bebibl", "bebible", "liquido", "liquid"], "alternatives": ["bebibl:*", "liquid:*"], "id": "liquido"},
    {"synonyms": ["steak", "bistec"], "alternatives": ["steak:*", "bistec:*"]},
    {"synonyms": ["bacon", "tocineta", "tocino"], "alternatives": ["baco:*", "tocin:*"]},
    {"synonyms": ["chicken", "pollo"], "alternatives": ["chick:*", "pollo:*"]},
    {"synonyms": ["rojo", "roja", "colorada", "red"], "alternatives": ["red:*", "roj:*", "colorad:*"], "id": "red"},
    {"synonyms": ["rib", "costilla"], "alternatives": ["rib:*", "costill:*"]},
    {"synonyms": ["short", "corto", "corta"], "alternatives": ["shor:*", "cort:*"]},
    {"synonyms": ["hamburguer", "hamburgesa", "hamburguesa", "burger", "burguer", "hamburger"], "alternatives": ["hamburg:*", "burger:*", "burguer:*"]},
    {"synonyms": ["squash", "calabaza"], "alternatives": ["squas:*", "calabaz:*"]},
    {"synonyms": ["gold", "dorado", "dorada", "golden"], "alternatives": ["gold:*", "dorad:*"]},
    {"synonyms": ["acorn", "bellota"], "alternatives": ["acorn", "bellot:*"]},
    {"synonyms": ["bbq", "barbeque"], "alternatives": ["bbq:*", "barbeq:*"]},
    {"synonyms": ["ajie", "aji"], "alternatives": ["aji:*"]},
    {"synonyms": ["smoked", "ahumado", "ahumada", "ahum", "smoke"], "alternatives": ["ahum:*", "smoke:*"]},
    {"synonyms": ["choriso", "chorizo"], "alternatives": ["chori:*"]},
    {"synonyms": ["soft", "suave"], "alternatives": ["soft:*", "suav:*"]},
    {"synonyms": ["swiss", "suizo", "suiso"], "alternatives": ["swis:*", "suiz:*", "suis:*"]},
    {"synonyms": ["spicy", "picante"], "alternatives": ["spicy:*", "picante:*"]},
    {"synonyms": ["std", "standard"], "alternatives": ["std:*", "standar:*", "estandar:*"]},
    {"synonyms": ["ext", "extra", "xtra", "mas"], "alternatives": ["ext:*", "xtra:*", "mas"]},
    {"synonyms": ["jugo", "juice", "zumo"], "alternatives": ["zumo:*", "jugo:*", "juice:*"]},
    {"synonyms": ["blueberry", "arandano"], "alternatives": ["blueberr:*", "arandan:*"]},
    {"synonyms": ["yaniqueque", "pastelito"], "alternatives": ["yaniquequ:*", "pastelit:*"]},
    {"synonyms": ["veggie", "vegetariano", "vegetariana", "vegano", "vegana"], "alternatives": ["veggi:*", "vegetarian:*", "vegi:*", "vegan:*"]},
    {"synonyms": ["flatbread", "pan plano"], "alternatives": ["flatbrea:*", "pan & plano"]},
    {"synonyms": ["sesamo", "sesame", "ajonjoli"], "alternatives": ["sesam:*", "ajonjoli"]},
    {"synonyms": ["ezekiel", "ezequiel"], "alternatives": ["ezeki:*", "ezequi:*"]},
    {"synonyms": ["decaffeinato", "descafeinado", "decaffeinato", "decafeinado"], "alternatives": ["decaf:*", "descaf:*"]},
    {"synonyms": ["big", "grande"], "alternatives": ["big:*", "grande:*"]},
    {"synonyms": ["tiny", "peq", "pequeno", "small"], "alternatives": ["tiny", "peq:*", "small"]},
    {"synonyms": ["tea", "te"], "alternatives": ["tea", "te"]},
    {"synonyms": ["iced", "frio", "fria"], "alternatives": ["iced:*", "fri:*"]},
    {"synonyms": ["lemon", "limon", "lima"], "alternatives": ["limon", "lima", "lemon"]},
    {"synonyms": ["white", "blanco", "blanca"], "alternatives": ["white", "blanc:*"], "id": "white"},
    {"synonyms": ["filter", "filtro"], "alternatives": ["filtr:*", "filter"]},
    {"synonyms": ["cookie", "galleta", "crisp", "gallet", "cooki"], "alternatives": ["cooki:*", "gallet:*", "crisp"], "id": "galleta"},
    {"synonyms": ["honey", "miel"], "alternatives": ["honey", "miel"]},
    {"synonyms": ["peanut", "mani"], "alternatives": ["peanu:*", "mani:*"]},
    {"synonyms": ["corn", "maiz"], "alternatives": ["corn", "maiz"]},
    {"synonyms": ["oat", "avena"], "alternatives": ["oat:*", "avena:*"]},
    {"synonyms": ["almond", "almendra", "walmond"], "alternatives": ["almond:*", "almendra:*", "walmond:*"]},
    {"synonyms": ["zucarita"], "alternatives": ["zucarita", "cereal & frosted & kelloggs"]},
    {"synonyms": ["cinnamon", "canela"], "alternatives": ["cinnamon", "canela:*"]},
    {"synonyms": ["frosted", "azucarado", "azucarada"], "alternatives": ["frosted", "azucarad:*"]},
    {"synonyms": ["spray", "aerosol", "rociador", "espray"], "alternatives": ["spray", "aerosol", "rociador", "espray"]},
    {"synonyms": ["virgin", "virgen"], "alternatives": ["virgin", "virgen"]},
    {"synonyms": ["molido", "en polvo", "molida", "fina", "fine", "grinder"], "alternatives": ["molid:*", "polvo", "fin:*", "grinder"]},
    {"synonyms": ["shredded", "rallado", "rallada", "shred"], "alternatives": ["shred:*", "rallad:*"]},
    {"synonyms": ["artisian", "artesana"], "alternatives": ["artisian", "artesan:*"]},
    {"synonyms": ["blue", "azul"], "alternatives": ["blue", "azul"]},
    {"synonyms": ["crumbled", "desmenuzado", "desmenuzada", "en trozos", "diced"], "alternatives": ["crumbled", "desmenuzad:*", "en & trozos", "diced"]},
    {"synonyms": ["herb", "hierba", "herbs", "herbal", "yerba"], "alternatives": ["herb:*", "hierb:*", "yerb:*"], "id": "hierba"},
    {"synonyms": ["wedge", "cuna"], "alternatives": ["wedge", "cuna"]},
    {"synonyms": ["untable", "spreadable", "spread"], "alternatives": ["untable", "spread:*"]},
    {"synonyms": ["cream", "crema", "creme"], "alternatives": ["cream:*", "crem:*"]},
    {"synonyms": ["mozzarella", "mozarella"], "alternatives": ["mozzarella", "mozarella"]},
    {"synonyms": ["parmesan", "parmesano", "parmesana"], "alternatives": ["parmesan:*"]},
    {"synonyms": ["flounder", "platija"], "alternatives": ["flounder", "platija"]},
    {"synonyms": ["cod", "bacalao"], "alternatives": ["cod", "bacalao"]},
    {"synonyms": ["fillet", "filete"], "alternatives": ["fillet:*", "filet:*"]},
    {"synonyms": ["ribeye", "rib eye"], "alternatives": ["ribeye", "rib & eye"]},
    {"synonyms": ["stick", "palito", "dedito", "string", "barrita"], "alternatives": ["stick:*", "palito", "dedito", "string:*", "barrita"]},
    {"synonyms": ["seafood", "marisco"], "alternatives": ["seafood", "marisco"]},
    {"synonyms": ["spinach", "espinaca"], "alternatives": ["spinach:*", "espinac:*"]},
    {"synonyms": ["tuna", "atun"], "alternatives": ["tuna", "atun"]},
    {"synonyms": ["squid", "calamar"], "alternatives": ["squid:*", "calamar:*"]},
    {"synonyms": ["blackberry", "mora", "black berry"], "alternatives": ["blackber:*", "mora", "black & berry"]},
    {"synonyms": ["dulce", "sweet", "tierno"], "alternatives": ["dulce", "sweet:*", "tierno"]},
    {"synonyms": ["guisante", "petit pois", "guisantes dulces", "guisante dulce", "guisante dulces"], "alternatives": ["guisante:*", "petit:* & poi:*"]},
    {"synonyms": ["oyster", "ostra"], "alternatives": ["oyster:*", "ostra"]},
    {"synonyms": ["coconut", "coco"], "alternatives": ["coconut", "coco"]},
    {"synonyms": ["sprout", "brote"], "alternatives": ["sprout:*", "brote"]},
    {"synonyms": ["seed", "semilla"], "alternatives": ["seed", "semilla"]},
    {"synonyms": ["with", "con", "al"], "alternatives": ["with", "con", "al", "c"], "id": "con"},
    {"synonyms": ["sal", "salt"], "alternatives": ["sal", "salt:*"], "id": "sal"},
    {"synonyms": ["salted", "salada", "salado"], "alternatives": ["salted", "salad:*"], "refs": ["con", "sal"]},
    {"synonyms": ["hazelnut", "avellana"], "alternatives": ["hazelnut:*", "avellana:*"]},
    {"synonyms": ["shelled", "pelado", "pelada"], "alternatives": ["shelled:*", "pelad:*"]},
    {"synonyms": ["mix", "mixed", "mixto", "mixta", "mezcla"], "alternatives": ["mix:*", "mezcl:*"]},
    {"synonyms": ["ring", "anilla", "anillo"], "alternatives": ["ring", "anill:*"]},
    {"synonyms": ["mandarina", "clementina"], "alternatives": ["mandarina", "clementina"]},
    {"synonyms": ["carnation", "evaporada"], "alternatives": ["carnation", "evaporad:*"]},
    {"synonyms": ["banana", "guineo"], "alternatives": ["banana:*", "guineo:*"]},
    {"synonyms": ["greek", "griego"], "alternatives": ["greek:*", "griego:*"]},
    {"synonyms": ["kid", "nino", "nina"], "alternatives": ["kid:*", "nino", "nina"]},
    {"synonyms": ["activia", "dannon"], "alternatives": ["activia", "dannon"]},
    {"synonyms": ["org", "organico", "organica", "orgain"], "alternatives": ["org:*"]},
    {"synonyms": ["margarina", "mantequilla", "butter"], "alternatives": ["margarin:*", "mantequilla", "butte:*"], "id": "mantequilla"},
    {"synonyms": ["vanilla", "vainilla"], "alternatives": ["vanilla:*", "vainilla:*"]},
    {"synonyms": ["peach", "durazno", "melocoton"], "alternatives": ["peach:*", "durazno", "melocoton:*"]},
    {"synonyms": ["pastel", "bizcocho", "biscocho"], "alternatives": ["pastel", "bizcocho:*", "biscocho:*"]},
    {"synonyms": ["green", "verde", "geen"], "alternatives": ["green:*", "verde"], "id": "verde"},
    {"synonyms": ["pea", "guandule"], "alternatives": ["pea", "guandule:*"]},
    {"synonyms": [""], "alternatives": ["buen:*"], "id": "buena"},
    {"synonyms": ["hierbabuena", "hierba buena"], "alternatives": ["hierbabuena", "hierba & buena"], "refs": ["hierba", "buena"]},
    {"synonyms": ["rosa", "flor"], "alternatives": ["rosa:*", "flor:*"]},
    {"synonyms": ["strawberry", "fresa"], "alternatives": ["strawberr:*", "fresa:*"]},
    {"synonyms": ["vegetal", "de soya"], "alternatives": ["vegetal", "de & soya"]},
    {"synonyms": ["avocado", "aguacate"], "alternatives": ["avocado:*", "aguacate:*"]},
    {"synonyms": ["oil", "aceite"], "alternatives": ["oil:*", "aceite:*"]},
    {"synonyms": ["cider", "sidra"], "alternatives": ["sider", "sidra"]},
    {"synonyms": ["walnut", "nuez", "nues", "nut"], "alternatives": ["wanut:*", "nue:*", "nut:*"]},
    {"synonyms": ["cherry", "cereza", "ceresa"], "alternatives": ["cherry", "cerez:*", "ceres:*"]},
    {"synonyms": ["grape", "uva"], "alternatives": ["grape:*", "uva:*"]},
    {"synonyms": ["apple", "manzana", "mansana"], "alternatives": ["apple:*", "manzan:*", "mansan:*"]},
    {"synonyms": ["raspberry", "frambuesa", "raspb"], "alternatives": ["raspb:*", "frambue:*"]},
    {"synonyms": ["pineapple", "pina"], "alternatives": ["pineapple:*", "pina:*"]},
    {"synonyms": ["funda", "sobre", "bolsa", "paquete", "paq", "pack"], "alternatives": ["funda", "sobre", "bolsa", "paquete", "pack:*"]},
    {"synonyms": ["imp", "importado", "importada"], "alternatives": ["imp:*"]},
    {"synonyms": ["leche", "milk", "alimento lacteo", "alim lacteo"], "alternatives": ["leche:*", "milk:*", "lacteo:*", "lactea:*"], "id": "leche"},
    {"synonyms": ["entero", "entera", "full"], "alternatives": ["enter:*", "full"], "id": "entero"},
    {"synonyms": ["leche entera", "leche liquida", "leche entero", "leche liquido"], "alternatives": ["leche & entera", "leche & liquida"], "refs": ["leche", "liquido"]},
    {"synonyms": ["fortigrow", "crecimiento", "fortificada"], "alternatives": ["forti:*", "crecimien:*"]},
    {"synonyms": ["balsamic", "balsamico", "balsamica"], "alternatives": ["balsamic:*"]},
    {"synonyms": ["ranchero", "ranchera"], "alternatives": ["rancher:*", "baldo:*"]},
    {"synonyms": ["sazon", "adobo"], "alternatives": ["sazon", "adobo"]},
    {"synonyms": ["one", "uno", "1"], "alternatives": ["one", "uno", "1"], "id": "1"},
    {"synonyms": ["two", "dos", "2"], "alternatives": ["two", "dos", "2"], "id": "2"},
    {"synonyms": ["three", "tres", "3"], "alternatives": ["three", "tres", "3"], "id": "3"},
    {"synonyms": ["four", "cuatro", "4"], "alternatives": ["four", "cuatro", "4"], "id": "4"},
    {"synonyms": ["five", "cinco", "5"], "alternatives": ["five", "cinco", "5"], "id": "5"},
    {"synonyms": ["six", "seis", "6"], "alternatives": ["six", "seis", "6"], "id": "6"},
    {"synonyms": ["seven", "siete", "7"], "alternatives": ["seven", "siete", "7"], "id": "7"},
    {"synonyms": ["eight", "ocho", "8"], "alternatives": ["eight", "ocho", "8"], "id": "8"},
    {"synonyms": ["nine", "nueve", "9"], "alternatives": ["nine", "nueve", "9"], "id": "9"},
    {"synonyms": ["duo", "doble"], "alternatives": ["duo", "doble"], "refs": ["2"]},
    {"synonyms": ["powder", "polvo"], "alternatives": ["powder", "polvo"]},
    {"synonyms": ["de coccion", "para cocinar", "de cocinar", "cocina"], "alternatives": ["coccio:*", "cocina:*"]},
    {"synonyms": ["nutmeg", "nuez moscada"], "alternatives": ["nutmeg:*", "nuez & moscada"]},
    {"synonyms": ["pink", "rosado", "rosada"], "alternatives": ["pink:*", "rosad:*"], "id": "pink"},
    {"synonyms": ["himalaya", "sal rosada", "himalayan"], "alternatives": ["himalaya:*"], "refs": ["sal", "pink"]},
    {"synonyms": ["pimienta", "pimiento", "pepper"], "alternatives": ["pimient:*", "pepper"], "id": "pimienta"},
    {"synonyms": ["paprika", "pimenton"], "alternatives": ["paprika:*", "pimento:*"]},
    {"synonyms": ["pimiento variado", "pimiento tricolor", "pimientos tricolor", "pimientos variado"], "alternatives": ["pimient:* & variado:*", "pimient:* & tricolor:*"]},
    {"synonyms": ["sea", "marino", "marina", "de mar"], "alternatives": ["sea", "marino", "marina", "de & mar"]},
    {"synonyms": ["coarse", "gruesa", "grueso"], "alternatives": ["coarse", "grues:*"]},
    {"synonyms": ["greenland", "lucas perez"], "alternatives": ["greenland", "lucas & perez"]},
    {"synonyms": ["frosting", "glaseado", "glaseada"], "alternatives": ["frosting", "glaseado"]},
    {"synonyms": ["chip", "chispa"], "alternatives": ["chisp:*", "chip:*"]},
    {"synonyms": ["cdc", "cour cereale", "cuor di cereale"], "alternatives": ["cdc", "cereal:*"]},
    {"synonyms": ["musclemilk", "muscle milk"], "alternatives": ["musclemilk:*", "muscle & milk"]},
    {"synonyms": ["bioeva", "bio eva"], "alternatives": ["bioeva:*", "bio & eva"]},
    {"synonyms": ["medie", "mediano", "mediana"], "alternatives": ["medie", "median:*"]},
    {"synonyms": ["ketchup", "catchup"], "alternatives": ["ketchup", "catchup"]},
    {"synonyms": ["lasagne", "lasagna", "lasana"], "alternatives": ["lasagn:*", "lasana"]},
    {"synonyms": ["linguine", "linguini"], "alternatives": ["linguin:*"]},
    {"synonyms": ["squeeze", "dispenser", "dispensador"], "alternatives": ["squeez:*", "dispens:*"]},
    {"synonyms": ["spaguetti", "espaguetti", "espagueti", "spaghetti"], "alternatives": ["espaguet:*", "spag:*"]},
    {"synonyms": ["baking", "hornear"], "alternatives": ["baking:*", "hornear:*"]},
    {"synonyms": ["edulcorante", "endulzante"], "alternatives": ["edulcorante", "endulzante"]},
    {"synonyms": ["sugar", "azucar", "sug"], "alternatives": ["azucar", "sug:*"], "id": "azucar"},
    {"synonyms": ["azucar refinada", "azucar refino", "azucar refina", "azucar refinado"], "alternatives": ["azucar & refin:*"], "refs": ["azucar", "white"]},
    {"synonyms": ["diet", "dietetica", "dietetico", "dieta"], "alternatives": ["diet:*"], "id": "diet"},
    {"synonyms": ["stevia"], "alternatives": ["stevia"], "refs": ["azucar", "diet"]},
    {"synonyms": ["salami", "salame"], "alternatives": ["salam:*"], "id": "salami"},
    {"synonyms": ["olive", "aceituna"], "alternatives": ["olive:*", "aceitun:*"]},
    {"synonyms": ["pickle", "encurtido", "encurtida", "pickled"], "alternatives": ["pickle:*", "encurtid:*"]},
    {"synonyms": ["baby", "bebe"], "alternatives": ["bab:*", "bebe:*"]},
    {"synonyms": ["bean", "habichuela"], "alternatives": ["bean:*", "habichuela:*"], "id": "habichuela"},
    {"synonyms": ["vainita", "habichuelas tiernas"], "alternatives": ["vainita", "habichuela:* & tiern:*"], "refs": ["habichuela", "verde"]},
    {"synonyms": ["tomato", "tomate"], "alternatives": ["tomat:*"], "id": "tomate"},
    {"synonyms": ["light", "lightly", "lite", "ligera", "ligero", "menos", "reduced", "reducida", "reducido", "bajo en", "low", "con poco", "con poca"], "alternatives": ["light:*", "lite", "liger:*", "menos", "reduc:*", "bajo", "low:*", "con & poca", "con & poco"]},
    {"synonyms": ["hongo", "champinon", "mushroom"], "alternatives": ["hongo:*", "champinon:*", "mushroom:*"]},
    {"synonyms": ["meat", "carne"], "alternatives": ["meat:*", "carn:*"]},
    {"synonyms": ["french", "france", "francesa"], "alternatives": ["french", "france:*"]},
    {"synonyms": ["basil", "albahaca", "basilico"], "alternatives": ["basil:*", "albahaca"]},
    {"synonyms": ["original", "tradicional", "regular"], "alternatives": ["original", "tradicional", "regular"]},
    {"synonyms": ["fat", "grasa"], "alternatives": ["fat", "grasa:*"], "id": "grasa"},
    {"synonyms": ["libre de grasa"], "alternatives": ["libre & de & grasa"], "refs": ["sin", "grasa"]},
    {"synonyms": ["reddi whip", "reddi wip"], "alternatives": ["reddi & whip", "reddi & wip"]},
    {"synonyms": ["vegetale", "verdura"], "alternatives": ["vegetale:*", "verdura:*"]},
    {"synonyms": ["heart", "corazon"], "alternatives": ["heart:*", "corazon:*"]},
    {"synonyms": ["palmito", "palm"], "alternatives": ["palm:*"]},
    {"synonyms": ["ajo", "garlic"], "alternatives": ["ajo", "garlic"], "id": "ajo"},
    {"synonyms": ["al ajillo"], "alternatives": ["al & ajillo"], "refs": ["con", "ajo"]},
    {"synonyms": ["hueso", "bone", "espina"], "alternatives": ["hueso", "bone", "esp:*"], "id": "hueso"},
    {"synonyms": ["deshuesada", "deshuesado", "spineless"], "alternatives": ["deshuesad:*", "spineless"], "refs": ["sin", "hueso"]},
    {"synonyms": ["onion", "cebolla"], "alternatives": ["onion", "ceboll:*"]},
    {"synonyms": ["roasted", "tostado", "asado", "rostizado", "rostizada", "asada", "tostada", "toasted"], "alternatives": ["roasted:*", "tostad:*", "toaste:*", "asad:*", "rostizad:*"]},
    {"synonyms": ["con sabor", "con sabor a", "sabor a"], "alternatives": ["sabor"]},
    {"synonyms": ["chestnut", "castana"], "alternatives": ["chestnut:*", "castana"]},
    {"synonyms": ["inut", "imperial nuts", "implerial nuts"], "alternatives": ["inut:*", "imperial:* & nut:*", "implerial:* & nut:*"]},
    {"synonyms": ["cacao", "cocoa", "chocolate", "choco"], "alternatives": ["cacao", "cocoa", "choco:*"]},
    {"synonyms": ["kitkat", "kit kat"], "alternatives": ["kit & kat", "kitkat"]},
    {"synonyms": ["mym", "m&m", "m m", "mm"], "alternatives": ["m&m", "m & m", "mm", "mym"]},
    {"synonyms": ["kiss", "beso", "besito", "kisse"], "alternatives": ["kiss:*", "beso:*", "besit:*"]},
    {"synonyms": ["teddy", "osito", "bear"], "alternatives": ["tedd:*", "osit:*", "bear:*", "oso"]},
    {"synonyms": ["chicle", "goma de mascar", "goma mascar"], "alternatives": ["chicl:*", "goma & mascar"]},
    {"synonyms": ["chalaca", "caramelo barrilete"], "alternatives": ["caramelo & barrilete", "chalaca"]},
    {"synonyms": ["style", "estilo"], "alternatives": ["style", "estilo"]},
    {"synonyms": ["teeth", "diente"], "alternatives": ["teeth", "diente"]},
    {"synonyms": ["american", "americano", "americana"], "alternatives": ["american:*"]},
    {"synonyms": ["italian", "italiano", "italiana"], "alternatives": ["italian:*"]},
    {"synonyms": ["aleman", "german"], "alternatives": ["aleman", "german"]},
    {"synonyms": ["mexico", "mexican", "mexicana", "mexicano", "mexi"], "alternatives": ["mexi:*"]},
    {"synonyms": ["argentino", "argentina", "argentinean"], "alternatives": ["argentin:*"]},
    {"synonyms": ["chileno", "chilena", "chilean"], "alternatives": ["chilean:*", "chilen:*"]},
    {"synonyms": ["brasileno", "brasilena", "brazilian", "brasilian"], "alternatives": ["brasil:*", "brazil:*"]},
    {"synonyms": ["popcorn", "palomita", "pop corn"], "alternatives": ["popcorn:*", "palomita:*", "pop & corn"]},
    {"synonyms": ["rice", "arroz"], "alternatives": ["rice", "arroz"]},
    {"synonyms": ["gelatina oli"], "alternatives": ["gelatina & oli", "geltaina & baldom"]},
    {"synonyms": ["carrot", "zanahoria"], "alternatives": ["carrot:*", "zanahori:*"]},
    {"synonyms": ["ice cream", "helado"], "alternatives": ["ice & cream", "helado"]},
    {"synonyms": ["lyptus", "eucalipto"], "alternatives": ["lyptu:*", "eucalipt:*"]},
    {"synonyms": ["menthol", "mentol"], "alternatives": ["mentho:*", "mentol:*"]},
    {"synonyms": ["orange", "naranja", "mamey"], "alternatives": ["orange:*", "naranja:*", "mamey"]},
    {"synonyms": ["marshmallow", "malvavisco", "malvabisco"], "alternatives": ["marshmall:*", "malvavisc:*", "malvabisc:*"]},
    {"synonyms": ["sirop", "jarabe"], "alternatives": ["sirop", "jarabe"]},
    {"synonyms": ["potato", "papa"], "alternatives": ["potat:*", "papa:*"]},
    {"synonyms": ["frie", "frita", "frito"], "alternatives": ["frie:*", "frit:*"]},
    {"synonyms": ["sour", "agrio", "agria", "amargo", "amarga"], "alternatives": ["sour", "agri:*", "amarg:*"]},
    {"synonyms": ["black", "negro", "negra", "moreno", "morena"], "alternatives": ["black", "negro:*", "negra:*", "morena:*", "moreno:*"]},
    {"synonyms": ["blue", "azul"], "alternatives": ["blue", "azul:*"]},
    {"synonyms": ["arveja", "chicharo", "green pea"], "alternatives": ["arveja", "chicharo", "green & pea"]},
    {"synonyms": ["lentil", "lenteja"], "alternatives": ["lentil", "lenteja"]},
    {"synonyms": ["dry", "seco", "seca"], "alternatives": ["dry", "seco", "seca"]},
    {"synonyms": ["fibra", "integral"], "alternatives": ["fibra", "integral"]},
    {"synonyms": ["galleta danesa", "galletas danesas", "galletas danesa", "galleta estilo danesa", "galleta de mantequilla"], "alternatives": ["galleta:* & danesa:*"], "refs": ["galleta", "mantequilla"]},
    {"synonyms": ["dietalat", "descremada", "descremado"], "alternatives": ["dietalat", "descremad:*"]},
    {"synonyms": ["turkey", "pavo"], "alternatives": ["turkey", "pavo"]},
]
