"""
Built-in fallback vocabulary.

Used when the CC-CEDICT dictionary can't be loaded. Multi-syllable phrases
are listed both concatenated and space-separated so that either input style
resolves as a single unit.
"""

FALLBACK_ENTRIES = {
    "ni": ["你 (you)", "泥 (mud)", "铌 (niobium)", "伱 (you, informal)", "㝵 (to obtain)"],
    "hao": ["好 (good)", "号 (number)", "毫 (milli-)", "郝 (surname)"],
    "wo": ["我 (I, me)", "窝 (nest)", "挝 (to beat)", "倭 (dwarf, Japan)"],
    "men": ["们 (plural suffix)", "门 (door)", "闷 (depressed)"],
    "zhong": ["中 (middle)", "种 (type)", "重 (heavy)"],
    "guo": ["国 (country)", "过 (to pass)", "果 (fruit)"],
    "shi": ["是 (to be)", "十 (ten)", "时 (time)"],
    "jie": ["界 (world)", "结 (to tie)", "姐 (elder sister)"],
    "ai": ["爱 (love)", "艾 (moxa)", "碍 (to hinder)"],
    "xie": ["谢 (to thank)", "些 (some)", "鞋 (shoes)"],
    "dui": ["对 (correct)", "队 (team)", "堆 (pile)"],
    "bu": ["不 (not)", "布 (cloth)", "步 (step)"],
    "qi": ["七 (seven)", "起 (to rise)", "气 (air)"],
    "mei": ["没 (not have)", "美 (beautiful)", "煤 (coal)"],
    "guan": ["关 (to close)", "管 (pipe)", "官 (official)"],
    "xi": ["西 (west)", "洗 (to wash)", "戏 (game)"],
    "qing": ["请 (please)", "情 (feeling)", "清 (clear)"],
    "wen": ["问 (to ask)", "文 (text)", "温 (warm)"],
    "jiao": ["叫 (to call)", "教 (to teach)", "觉 (to sleep)"],
    "bei": ["北 (north)", "被 (by)", "背 (back)"],
    "jing": ["京 (capital)", "经 (pass through)", "精 (essence)"],
    "shang": ["上 (up)", "商 (merchant)", "伤 (wound)"],
    "hai": ["海 (sea)", "还 (still)", "孩 (child)"],
    # Phrases
    "woaini": ["我爱你 (I love you)"],
    "wo ai ni": ["我爱你 (I love you)"],
    "ni hao": ["你好 (hello)"],
    "xiexie": ["谢谢 (thank you)"],
    "xie xie": ["谢谢 (thank you)"],
    "duibuqi": ["对不起 (sorry)"],
    "dui bu qi": ["对不起 (sorry)"],
    "meiguanxi": ["没关系 (it's okay)"],
    "mei guan xi": ["没关系 (it's okay)"],
    "qingwen": ["请问 (excuse me)"],
    "qing wen": ["请问 (excuse me)"],
    "wojiao": ["我叫 (my name is)"],
    "wo jiao": ["我叫 (my name is)"],
    "zhongguo": ["中国 (China)"],
    "zhong guo": ["中国 (China)"],
    "beijing": ["北京 (Beijing)"],
    "bei jing": ["北京 (Beijing)"],
    "shanghai": ["上海 (Shanghai)"],
    "shang hai": ["上海 (Shanghai)"],
}
