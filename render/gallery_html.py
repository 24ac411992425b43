"""Self-contained HTML page for the emoji gallery.

HTML structure, CSS and the client-side script all live in the
``GALLERY_TEMPLATE`` constant so the page is served as a single response.
It is a jinja2 template: ``records`` and ``groups`` come from
``render.gallery.render``. Text fields are autoescaped; only the glyph is
marked ``safe``.
"""

GALLERY_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Emoji Gallery</title>
<style>
body {
  font-family: Arial, sans-serif;
  margin: 20px;
}
h1 {
  text-align: center;
}
.search-bar,
.filter-bar {
  margin-bottom: 20px;
  text-align: center;
}
input[type="text"] {
  width: 300px;
  padding: 10px;
  font-size: 16px;
}
select {
  padding: 10px;
  font-size: 16px;
}
.gallery {
  display: flex;
  flex-wrap: wrap;
  justify-content: center;
}
.emoji-card {
  border: 1px solid #ddd;
  border-radius: 8px;
  margin: 10px;
  padding: 15px;
  width: 120px;
  text-align: center;
  box-shadow: 0 4px 8px rgba(0, 0, 0, 0.1);
}
.emoji-code {
  font-size: 2em;
  cursor: pointer;
}
.emoji-name {
  font-weight: bold;
  margin-top: 10px;
}
.hidden {
  display: none;
}
.notification {
  position: fixed;
  top: 20px;
  left: 50%;
  transform: translateX(-50%);
  background-color: #4caf50;
  color: white;
  padding: 10px 20px;
  border-radius: 5px;
  opacity: 1;
  transition: opacity 0.5s ease;
  z-index: 1000;
}
.notification.fade-out {
  opacity: 0;
}
</style>
<script>
var NOTICE_VISIBLE_MS = 2000;
var NOTICE_FADE_MS = 500;

function cardText(card, cls) {
  return card.getElementsByClassName(cls)[0].innerText.toLowerCase();
}

function filterEmojis() {
  var query = document.getElementById("searchInput").value.toLowerCase();
  var group = document.getElementById("groupFilter").value.toLowerCase();
  var cards = document.getElementsByClassName("emoji-card");

  for (var i = 0; i < cards.length; i++) {
    var textHit = cardText(cards[i], "emoji-name").includes(query) ||
                  cardText(cards[i], "emoji-category").includes(query);
    var groupHit = group === "all" || cardText(cards[i], "emoji-group") === group;
    cards[i].classList.toggle("hidden", !(textHit && groupHit));
  }
}

function showNotification(message) {
  var notice = document.createElement("div");
  notice.className = "notification";
  notice.innerText = message;
  document.body.appendChild(notice);

  setTimeout(function() {
    notice.classList.add("fade-out");
    setTimeout(function() {
      notice.remove();
    }, NOTICE_FADE_MS);
  }, NOTICE_VISIBLE_MS);
}

function copyEmoji(glyph) {
  navigator.clipboard.writeText(glyph).then(function() {
    showNotification("Emoji copied to clipboard: " + glyph);
  }, function(err) {
    console.error("Could not copy emoji: ", err);
  });
}

document.addEventListener("DOMContentLoaded", function() {
  var glyphs = document.getElementsByClassName("emoji-code");
  for (var i = 0; i < glyphs.length; i++) {
    glyphs[i].addEventListener("click", function() {
      copyEmoji(this.innerHTML.trim());
    });
  }
});
</script>
</head>
<body>
<h1>Emoji Gallery</h1>

<div class="search-bar">
  <input type="text" id="searchInput" placeholder="Search emojis..." onkeyup="filterEmojis()">
</div>

<div class="filter-bar">
  <label for="groupFilter">Filter by group:</label>
  <select id="groupFilter" onchange="filterEmojis()">
    <option value="all">All</option>
{%- for group in groups %}
    <option value="{{ group }}">{{ group }}</option>
{%- endfor %}
  </select>
</div>

<div class="gallery">
{%- for record in records %}
  <div class="emoji-card">
    <div class="emoji-code">{{ record.glyph | safe }}</div>
    <div class="emoji-name">{{ record.name }}</div>
    <div class="emoji-category">{{ record.category }}</div>
    <div class="emoji-group">{{ record.group }}</div>
  </div>
{%- endfor %}
</div>
</body>
</html>
"""
